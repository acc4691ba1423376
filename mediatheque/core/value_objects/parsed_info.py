"""
Objets valeur pour les informations de parsing de noms de fichiers.

Objets valeur immutables representant les informations extraites d'un nom
de fichier ou de dossier video, et la classification du type de media.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaType(Enum):
    """Type de media detecte depuis le nom de fichier.

    Valeurs:
        MOVIE: Film (aucun marqueur d'episode)
        SERIES: Episode de serie (saison et episode presents)
    """

    MOVIE = "movie"
    SERIES = "series"


@dataclass(frozen=True)
class ParsedName:
    """
    Informations extraites du parsing d'un nom de fichier ou de dossier.

    Quand parsed=False, title vaut exactement le nom brut et aucun champ
    numerique n'est renseigne : on n'invente jamais de donnees.

    Attributs:
        title: Titre nettoye (ou nom brut si non parse)
        year: Annee sur 4 caracteres (ex: "2021")
        season: Numero de saison
        episode: Numero d'episode
        episode_end: Dernier episode pour les multi-episodes (S01E01E02)
        episode_title: Titre de l'episode s'il precede les tags qualite
        original_name: Nom brut fourni au classifieur
        parsed: True si le nom a ete reconnu
    """

    title: str
    original_name: str
    year: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    episode_end: Optional[int] = None
    episode_title: Optional[str] = None
    parsed: bool = False

    @classmethod
    def unparsed(cls, name: str) -> "ParsedName":
        """Resultat de repli : le nom brut, sans aucune donnee extraite."""
        return cls(title=name, original_name=name, parsed=False)

    @property
    def is_episode(self) -> bool:
        """True si un marqueur saison/episode a ete reconnu."""
        return self.parsed and self.season is not None and self.episode is not None

    @property
    def media_type(self) -> MediaType:
        """Type de media deduit des marqueurs trouves."""
        return MediaType.SERIES if self.is_episode else MediaType.MOVIE

    def display_name(self) -> str:
        """
        Nom affichable : "Titre (Annee) S01E02E03 - Titre episode".

        Les parties absentes sont omises. Un nom non parse est retourne tel quel.
        """
        if not self.parsed:
            return self.title

        formatted = self.title
        if self.year:
            formatted += f" ({self.year})"

        if self.season is not None and self.episode is not None:
            formatted += f" S{self.season:02d}E{self.episode:02d}"
            if self.episode_end is not None:
                formatted += f"E{self.episode_end:02d}"
            if self.episode_title:
                formatted += f" - {self.episode_title}"

        return formatted


@dataclass(frozen=True)
class EpisodeMarker:
    """
    Marqueur saison/episode trouve dans un nom.

    Attributs:
        season: Numero de saison
        episode: Premier episode
        episode_end: Dernier episode pour les multi-episodes
        start: Position du marqueur dans le texte analyse
        end: Position de fin du marqueur
    """

    season: int
    episode: int
    episode_end: Optional[int] = None
    start: int = 0
    end: int = 0
