"""
Point d'entrée CLI de la médiathèque.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    cache_app,
    classify,
    continue_watching,
    next_episode,
    progress_app,
    scan,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="mediatheque",
    help="Catalogue de vidéothèque personnelle",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


def _console_level(verbose: int, quiet: bool, default: str) -> str:
    if quiet:
        return "ERROR"
    if verbose >= 1:
        return "DEBUG"
    return default


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Médiathèque - Catalogue de films et séries."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    settings = get_config()
    configure_logging(
        log_level=_console_level(verbose, quiet, settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Commandes de la bibliotheque
app.command()(scan)
app.command()(classify)

# Commandes de progression ("continue" et "next" sont des mots reserves Python)
app.command(name="continue")(continue_watching)
app.command(name="next")(next_episode)
app.add_typer(progress_app, name="progress")

# Caches
app.add_typer(cache_app, name="cache")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration de la médiathèque")
    typer.echo(f"Bibliothèque : {config.library_dir}")
    typer.echo(f"Données : {config.data_dir}")
    typer.echo(f"Cache technique : {config.metadata_cache_file}")
    typer.echo(f"Cache distant : {config.remote_cache_file}")
    typer.echo(f"Progression : {config.progress_file}")
    typer.echo(f"Workers de scan : {config.scan_workers}")
    typer.echo(f"Délai de sonde : {config.probe_timeout_seconds}s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"mediatheque v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
