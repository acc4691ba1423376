"""
Construction du catalogue de la bibliotheque.

Enchaine le scan et le regroupement des episodes en series.
"""

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from mediatheque.core.entities.media import Movie, TVShow
from mediatheque.services.scanner import LibraryScanner, ProgressCallback, ScanOutcome
from mediatheque.services.show_assembler import ShowAssembler


@dataclass
class Catalog:
    """
    Catalogue issu d'un scan.

    Attributs:
        outcome: Resultat brut du scan
        movies: Films trouves
        shows: Series regroupees
        dropped_episodes: Episodes ecartes au regroupement
    """

    outcome: ScanOutcome
    movies: list[Movie] = field(default_factory=list)
    shows: list[TVShow] = field(default_factory=list)
    dropped_episodes: int = 0

    @property
    def success(self) -> bool:
        return self.outcome.success


class LibraryService:
    """Service de haut niveau : scan puis regroupement en series."""

    def __init__(self, scanner: LibraryScanner, assembler: ShowAssembler) -> None:
        self._scanner = scanner
        self._assembler = assembler

    def build_catalog(
        self,
        root_path: Path,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Catalog:
        outcome = self._scanner.scan(root_path, on_progress, cancel_event)
        shows = self._assembler.assemble(outcome.episodes)
        return Catalog(
            outcome=outcome,
            movies=outcome.movies,
            shows=shows,
            dropped_episodes=self._assembler.last_dropped,
        )
