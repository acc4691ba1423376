"""
Entités fichier vidéo.

Entités représentant les entrées du système de fichiers rencontrées pendant
un scan, et les fichiers vidéo retenus sur les films et épisodes.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RawEntry:
    """
    Entrée brute d'un répertoire, produite et consommée pendant un scan.

    Attributs :
        name : Nom de l'entrée (sans le chemin)
        path : Chemin complet
        is_directory : True pour un dossier
        size : Taille en octets (fichiers uniquement)
        extension : Extension en minuscules avec le point (fichiers uniquement)
    """

    name: str
    path: Path
    is_directory: bool
    size: Optional[int] = None
    extension: Optional[str] = None


@dataclass(frozen=True)
class VideoFile:
    """
    Fichier vidéo retenu dans le catalogue.

    Attributs :
        name : Nom de fichier
        path : Chemin complet
        extension : Extension en minuscules
        size : Taille en octets
    """

    name: str
    path: Path
    extension: str = ""
    size: int = 0

    @classmethod
    def from_entry(cls, entry: RawEntry) -> "VideoFile":
        return cls(
            name=entry.name,
            path=entry.path,
            extension=entry.extension or "",
            size=entry.size or 0,
        )


@dataclass
class FlatEpisode:
    """
    Épisode détecté par le scanner, avant regroupement par série.

    Reprend les champs du nom parsé et y ajoute l'emplacement du fichier
    et ses métadonnées techniques.
    """

    title: str
    original_name: str
    path: Path
    parsed: bool = False
    year: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    episode_end: Optional[int] = None
    episode_title: Optional[str] = None
    files: list[VideoFile] = field(default_factory=list)
    resolution: Optional[str] = None
    duration: Optional[int] = None
