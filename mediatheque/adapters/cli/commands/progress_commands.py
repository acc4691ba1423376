"""
Commandes CLI de progression de lecture (continue, next, progress).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from mediatheque.adapters.cli.helpers import console, suppress_loguru, with_container
from mediatheque.core.value_objects.identity import ShowIdentity, parse_item_key

progress_app = typer.Typer(
    name="progress",
    help="Consultation et edition de la progression de lecture",
    rich_markup_mode="rich",
)


def continue_watching(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", min=1, help="Nombre maximum d'elements"),
    ] = None,
) -> None:
    """Affiche les elements a reprendre, du plus recent au plus ancien."""
    _continue_watching(limit)


@with_container()
def _continue_watching(container, limit: Optional[int]) -> None:
    config = container.config()
    entries = container.progress_store().get_continue_watching(
        limit or config.continue_watching_limit
    )

    if not entries:
        console.print("[dim]Rien a reprendre.[/dim]")
        return

    table = Table(title="Reprendre la lecture")
    table.add_column("Element", style="bold")
    table.add_column("Type")
    table.add_column("Progression", justify="right")
    table.add_column("Restant", justify="right")
    table.add_column("Vu le")
    for entry in entries:
        record = entry.record
        table.add_row(
            entry.media_id,
            "serie" if record.media_type == "tvshow" else "film",
            f"{record.percentage:.0f}%",
            f"{entry.remaining_minutes} min",
            record.last_watched.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


def next_episode(
    title: Annotated[str, typer.Argument(help="Titre de la serie")],
    year: Annotated[
        Optional[str], typer.Option("--year", "-y", help="Annee de la serie")
    ] = None,
    path: Annotated[
        Optional[Path], typer.Option("--path", help="Racine de la bibliotheque")
    ] = None,
) -> None:
    """Indique l'episode a lire ensuite pour une serie."""
    _next_episode(title, year, path)


@with_container()
def _next_episode(container, title: str, year: Optional[str], path: Optional[Path]) -> None:
    config = container.config()
    with suppress_loguru():
        catalog = container.library_service().build_catalog(path or config.library_dir)

    if not catalog.success:
        console.print(f"[red]Erreur:[/red] {catalog.outcome.error}")
        raise typer.Exit(code=1)

    show = next(
        (
            candidate
            for candidate in catalog.shows
            if candidate.title.casefold() == title.casefold()
            and (year is None or candidate.year == year)
        ),
        None,
    )
    if show is None:
        console.print(f"[yellow]Serie introuvable:[/yellow] {title}")
        raise typer.Exit(code=1)

    result = container.progress_store().find_next_episode(
        ShowIdentity(title=show.title, year=show.year), show.seasons
    )
    if result is None:
        console.print(f"[green]{show.title}[/green]: aucun episode restant")
        return
    console.print(
        f"[green]{show.title}[/green]: S{result.season:02d}E{result.episode:02d}"
    )


@progress_app.command("show")
def progress_show(
    item_id: Annotated[str, typer.Argument(help="Cle du film ou de l'episode")],
) -> None:
    """Affiche la progression enregistree pour un element."""
    _progress_show(item_id)


@with_container()
def _progress_show(container, item_id: str) -> None:
    record = container.progress_store().get_progress(item_id)
    if record is None:
        console.print(f"[yellow]Aucune progression pour[/yellow] {item_id}")
        raise typer.Exit(code=1)

    console.print(f"[bold]{item_id}[/bold]")
    console.print(f"  Position : {record.time:.0f}s / {record.duration:.0f}s")
    console.print(f"  Progression : {record.percentage:.1f}%")
    console.print(f"  Vu le : {record.last_watched.isoformat()}")
    if record.show_name:
        console.print(
            f"  Serie : {record.show_name} S{record.season or 0:02d}E{record.episode or 0:02d}"
        )


@progress_app.command("set")
def progress_set(
    item_id: Annotated[str, typer.Argument(help="Cle du film ou de l'episode")],
    time: Annotated[float, typer.Argument(min=0, help="Position en secondes")],
    duration: Annotated[float, typer.Argument(min=0, help="Duree totale en secondes")],
) -> None:
    """Enregistre une position de lecture (supprimee a partir de 95 %)."""
    _progress_set(item_id, time, duration)


@with_container()
def _progress_set(container, item_id: str, time: float, duration: float) -> None:
    identity = parse_item_key(item_id)
    if identity is None:
        console.print(f"[red]Cle invalide:[/red] {item_id}")
        raise typer.Exit(code=1)

    record = container.progress_store().record_playback(identity, time, duration)
    if record is None:
        console.print(f"[green]{item_id}[/green]: lecture terminee, progression supprimee")
    else:
        console.print(f"[green]{item_id}[/green]: {record.percentage:.1f}%")


@progress_app.command("remove")
def progress_remove(
    item_id: Annotated[str, typer.Argument(help="Cle du film ou de l'episode")],
) -> None:
    """Supprime la progression d'un element."""
    _progress_remove(item_id)


@with_container()
def _progress_remove(container, item_id: str) -> None:
    if container.progress_store().remove_progress(item_id):
        console.print(f"[green]Progression supprimee:[/green] {item_id}")
    else:
        console.print(f"[yellow]Aucune progression pour[/yellow] {item_id}")
