"""
Commandes CLI de la bibliotheque (scan, classify).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)
from rich.table import Table

from mediatheque.adapters.cli.helpers import (
    console,
    format_duration,
    quality_label,
    suppress_loguru,
    with_container,
)
from mediatheque.adapters.parsing.name_classifier import NameClassifier
from mediatheque.services.library import Catalog
from mediatheque.services.scanner import ScanProgress


def scan(
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Racine a scanner (defaut: library_dir)"),
    ] = None,
    details: Annotated[
        bool,
        typer.Option("--details", "-d", help="Affiche les saisons et episodes"),
    ] = False,
) -> None:
    """Scanne la bibliotheque et affiche films et series."""
    _scan(path, details)


@with_container()
def _scan(container, path: Optional[Path], details: bool) -> None:
    config = container.config()
    root = path or config.library_dir
    service = container.library_service()

    with suppress_loguru(), Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"[cyan]Scan de {root}...", total=None)

        def on_progress(update: ScanProgress) -> None:
            progress.update(task, completed=update.current, total=update.total)

        catalog = service.build_catalog(root, on_progress=on_progress)

    if not catalog.success:
        console.print(f"[red]Erreur:[/red] {catalog.outcome.error}")
        raise typer.Exit(code=1)

    _render_catalog(catalog, details)


def _render_catalog(catalog: Catalog, details: bool) -> None:
    movies = Table(title=f"Films ({len(catalog.movies)})")
    movies.add_column("Titre", style="bold")
    movies.add_column("Annee")
    movies.add_column("Resolution")
    movies.add_column("Qualite")
    movies.add_column("Duree", justify="right")
    movies.add_column("Fichiers", justify="right")
    for movie in catalog.movies:
        movies.add_row(
            movie.title,
            movie.year or "-",
            movie.resolution or "-",
            quality_label(movie.resolution),
            format_duration(movie.duration),
            str(len(movie.files)),
        )
    console.print(movies)

    shows = Table(title=f"Series ({len(catalog.shows)})")
    shows.add_column("Titre", style="bold")
    shows.add_column("Annee")
    shows.add_column("Saisons", justify="right")
    shows.add_column("Episodes", justify="right")
    for show in catalog.shows:
        shows.add_row(
            show.title,
            show.year or "-",
            str(len(show.seasons)),
            str(show.episode_count),
        )
    console.print(shows)

    if details:
        for show in catalog.shows:
            console.print(f"\n[bold]{show.title}[/bold] ({show.year or '-'})")
            for season in show.seasons:
                numbers = ", ".join(str(episode.episode_number) for episode in season.episodes)
                console.print(f"  Saison {season.season_number}: {numbers}")

    if catalog.dropped_episodes:
        console.print(
            f"[yellow]{catalog.dropped_episodes} episode(s) non reconnu(s) ignore(s)[/yellow]"
        )


def classify(
    names: Annotated[list[str], typer.Argument(help="Noms de fichiers ou dossiers")],
    folder: Annotated[
        bool,
        typer.Option("--folder", "-f", help="Traite les noms comme des dossiers"),
    ] = False,
) -> None:
    """Affiche la classification de noms de fichiers."""
    classifier = NameClassifier()
    table = Table(title="Classification")
    table.add_column("Nom")
    table.add_column("Titre", style="bold")
    table.add_column("Annee")
    table.add_column("Episode")
    table.add_column("Reconnu")

    for name in names:
        parsed = classifier.classify_folder(name) if folder else classifier.classify(name)
        episode = "-"
        if parsed.is_episode:
            episode = f"S{parsed.season:02d}E{parsed.episode:02d}"
            if parsed.episode_end is not None:
                episode += f"E{parsed.episode_end:02d}"
        table.add_row(
            name,
            parsed.title,
            parsed.year or "-",
            episode,
            "[green]oui[/green]" if parsed.parsed else "[red]non[/red]",
        )
    console.print(table)
