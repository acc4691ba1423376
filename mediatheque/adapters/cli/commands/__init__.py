"""Sous-package CLI commands - re-exporte les commandes publiques."""

from mediatheque.adapters.cli.commands.cache_commands import (
    cache_app,
    cache_get,
    cache_remote,
)
from mediatheque.adapters.cli.commands.library_commands import (
    classify,
    scan,
)
from mediatheque.adapters.cli.commands.progress_commands import (
    continue_watching,
    next_episode,
    progress_app,
    progress_remove,
    progress_set,
    progress_show,
)

__all__ = [
    # bibliotheque
    "scan",
    "classify",
    # progression
    "continue_watching",
    "next_episode",
    "progress_app",
    "progress_show",
    "progress_set",
    "progress_remove",
    # caches
    "cache_app",
    "cache_get",
    "cache_remote",
]
