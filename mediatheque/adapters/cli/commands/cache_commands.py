"""
Commandes CLI d'inspection des caches de metadonnees.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mediatheque.adapters.cli.helpers import console, format_duration, with_container

cache_app = typer.Typer(
    name="cache",
    help="Inspection des caches de metadonnees",
    rich_markup_mode="rich",
)


@cache_app.command("get")
def cache_get(
    path: Annotated[Path, typer.Argument(help="Fichier video")],
    probe: Annotated[
        bool,
        typer.Option("--probe", "-p", help="Sonde le fichier s'il n'est pas en cache"),
    ] = False,
) -> None:
    """Affiche les metadonnees techniques en cache pour un fichier."""
    _cache_get(path, probe)


@with_container()
def _cache_get(container, path: Path, probe: bool) -> None:
    cache = container.technical_cache()
    metadata = cache.get_or_probe(path) if probe else cache.get(path)

    if metadata is None or metadata.is_empty:
        console.print(f"[yellow]Aucune metadonnee pour[/yellow] {path}")
        raise typer.Exit(code=1)

    console.print(f"[bold]{path.name}[/bold]")
    console.print(f"  Resolution : {metadata.resolution or '-'}")
    console.print(f"  Duree : {format_duration(metadata.duration)}")


@cache_app.command("remote")
def cache_remote(
    title: Annotated[str, typer.Argument(help="Titre")],
    year: Annotated[Optional[str], typer.Option("--year", "-y", help="Annee")] = None,
    media_type: Annotated[
        Optional[str], typer.Option("--type", "-t", help="movie ou tvshow")
    ] = None,
) -> None:
    """Affiche les metadonnees distantes en cache pour un titre."""
    _cache_remote(title, year, media_type)


@with_container()
def _cache_remote(container, title: str, year: Optional[str], media_type: Optional[str]) -> None:
    metadata = container.remote_cache().get(title, year, media_type)
    if metadata is None:
        console.print(f"[yellow]Rien en cache pour[/yellow] {title}")
        raise typer.Exit(code=1)

    console.print(f"[bold]{title}[/bold] ({year or '-'})")
    for key, value in metadata.items():
        console.print(f"  {key} : {value}")
