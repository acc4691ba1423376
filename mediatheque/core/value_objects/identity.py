"""
Identites des elements suivis par le store de progression.

Un film est identifie par son nom de dossier/fichier d'origine, un episode
par sa serie (titre + annee), sa saison et son numero. Les cles du fichier
de progression sont produites par item_key() et relues par parse_item_key() :
c'est l'unique paire de serialisation, aucun autre module ne reconstruit
une identite a partir d'une chaine formatee.

Formats de cle:
    film    : "{nom d'origine}"
    episode : "{titre} ({annee|no-year})||S{saison:02}E{episode:02}"
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from mediatheque.utils.constants import NO_YEAR

EPISODE_KEY_SEPARATOR = "||"

_EPISODE_SUFFIX_RE = re.compile(r"^S(\d{2,})E(\d{2,})$")


@dataclass(frozen=True)
class MovieIdentity:
    """Identite d'un film : son nom de dossier ou de fichier d'origine."""

    name: str


@dataclass(frozen=True)
class ShowIdentity:
    """Identite d'une serie : titre et annee (optionnelle)."""

    title: str
    year: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.title} ({self.year or NO_YEAR})"

    @property
    def key_prefix(self) -> str:
        """Prefixe commun a toutes les cles d'episodes de la serie."""
        return f"{self.key}{EPISODE_KEY_SEPARATOR}"


@dataclass(frozen=True)
class EpisodeIdentity:
    """Identite d'un episode : serie, saison et numero d'episode."""

    show: ShowIdentity
    season: int
    episode: int


ItemIdentity = Union[MovieIdentity, EpisodeIdentity]


def item_key(identity: ItemIdentity) -> str:
    """
    Serialise une identite en cle de store.

    Args:
        identity: Identite d'un film ou d'un episode

    Returns:
        La cle texte correspondante
    """
    if isinstance(identity, EpisodeIdentity):
        return (
            f"{identity.show.key_prefix}"
            f"S{identity.season:02d}E{identity.episode:02d}"
        )
    return identity.name


def parse_item_key(key: str, media_type: Optional[str] = None) -> Optional[ItemIdentity]:
    """
    Relit une cle de store en identite structuree.

    La cle d'episode est coupee sur le DERNIER separateur "||", ce qui
    tolere un titre de serie contenant lui-meme "||S".

    Args:
        key: Cle lue dans le store
        media_type: Type enregistre avec la progression ("movie" ou "tvshow").
                    "movie" force une identite de film.

    Returns:
        L'identite correspondante, ou None si la cle d'episode est malformee
        (type "tvshow" mais suffixe illisible).
    """
    if media_type == "movie":
        return MovieIdentity(name=key)

    show_part, separator, suffix = key.rpartition(EPISODE_KEY_SEPARATOR)
    match = _EPISODE_SUFFIX_RE.match(suffix) if separator else None
    if match is None:
        if media_type == "tvshow":
            return None
        return MovieIdentity(name=key)

    show = _parse_show_key(show_part)
    if show is None:
        return None if media_type == "tvshow" else MovieIdentity(name=key)

    return EpisodeIdentity(
        show=show,
        season=int(match.group(1)),
        episode=int(match.group(2)),
    )


def _parse_show_key(show_key: str) -> Optional[ShowIdentity]:
    """Relit "Titre (annee)" ; None si la forme n'est pas respectee."""
    if not show_key.endswith(")"):
        return None
    title, separator, year = show_key[:-1].rpartition(" (")
    if not separator or not title:
        return None
    return ShowIdentity(title=title, year=None if year == NO_YEAR else year)
