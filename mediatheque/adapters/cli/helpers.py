"""
Utilitaires partages pour les commandes CLI de la mediatheque.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- format_duration : affichage d'une duree en minutes
- quality_label : libelle de qualite d'une resolution
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console

from mediatheque.container import Container
from mediatheque.core.value_objects.media_info import Resolution

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("mediatheque")
    try:
        yield
    finally:
        loguru_logger.enable("mediatheque")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container()
        def _my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def quality_label(resolution: Optional[str]) -> str:
    """Libelle de qualite ("1080p", "4K"...) d'une resolution "{largeur}x{hauteur}"."""
    parsed = Resolution.parse(resolution)
    return parsed.label if parsed is not None else "-"


def format_duration(minutes: Optional[int]) -> str:
    """Formate une duree en minutes ("1h42", "45 min", "-")."""
    if minutes is None:
        return "-"
    if minutes >= 60:
        return f"{minutes // 60}h{minutes % 60:02d}"
    return f"{minutes} min"
