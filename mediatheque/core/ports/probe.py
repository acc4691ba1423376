"""
Interface port pour la sonde technique des fichiers video.

La sonde lit largeur, hauteur et duree d'un fichier. Le domaine en derive
la resolution "{largeur}x{hauteur}" et la duree en minutes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ProbeError(Exception):
    """
    Exception levee quand un fichier ne peut pas etre sonde.

    Attributes:
        path: Fichier concerne
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Echec de la sonde pour {path}: {reason}")


class ProbeTimeoutError(ProbeError):
    """La sonde n'a pas repondu dans le delai imparti."""

    def __init__(self, path: Path, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(path, f"delai depasse ({timeout}s)")


@dataclass(frozen=True)
class ProbeResult:
    """
    Resultat brut d'une sonde.

    Attributs:
        width: Largeur de la premiere piste video
        height: Hauteur de la premiere piste video
        duration_seconds: Duree en secondes
    """

    width: Optional[int] = None
    height: Optional[int] = None
    duration_seconds: Optional[float] = None

    @property
    def resolution(self) -> Optional[str]:
        if self.width is None or self.height is None:
            return None
        return f"{self.width}x{self.height}"

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.duration_seconds is None:
            return None
        return round(self.duration_seconds / 60)


class IMediaProbe(ABC):
    """
    Interface pour la lecture des metadonnees techniques d'un fichier video.
    """

    @abstractmethod
    def probe(self, file_path: Path) -> ProbeResult:
        """
        Sonde un fichier video.

        Args:
            file_path: Chemin complet vers le fichier video

        Retourne:
            ProbeResult avec les dimensions et la duree

        Leve:
            ProbeError: si le fichier est absent, illisible ou corrompu
        """
        ...
