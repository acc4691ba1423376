"""
Objets valeur pour la progression de lecture.

Les enregistrements sont persistes au format JSON historique (cles camelCase :
lastWatched, mediaType, showName) pour rester lisibles par les fichiers
existants.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from mediatheque.utils.constants import COMPLETED_PERCENTAGE, IN_PROGRESS_MIN_PERCENTAGE


def utc_now() -> datetime:
    """Horodatage courant en UTC."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Relit un horodatage ISO-8601 (accepte le suffixe "Z").

    Returns:
        datetime avec fuseau (UTC si absent), ou None si illisible
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Ecrit un horodatage ISO-8601 en UTC, au format "...Z"."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ProgressRecord:
    """
    Progression de lecture d'un film ou d'un episode.

    Attributs:
        time: Position de lecture en secondes
        duration: Duree totale en secondes
        percentage: Pourcentage lu, borne a [0, 100]
        last_watched: Date de derniere lecture (UTC)
        media_type: "movie" ou "tvshow"
        show_name: Titre de la serie (episodes uniquement)
        season: Numero de saison (episodes uniquement)
        episode: Numero d'episode (episodes uniquement)
    """

    time: float
    duration: float
    percentage: float
    last_watched: datetime
    media_type: str = "movie"
    show_name: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "time": self.time,
            "duration": self.duration,
            "percentage": self.percentage,
            "lastWatched": format_timestamp(self.last_watched),
            "mediaType": self.media_type,
        }
        if self.show_name is not None:
            data["showName"] = self.show_name
        if self.season is not None:
            data["season"] = self.season
        if self.episode is not None:
            data["episode"] = self.episode
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Optional["ProgressRecord"]:
        """
        Relit un enregistrement persiste.

        Returns:
            ProgressRecord, ou None si l'entree est inexploitable
            (pas un objet, horodatage ou nombres illisibles)
        """
        if not isinstance(data, dict):
            return None

        last_watched = parse_timestamp(data.get("lastWatched"))
        if last_watched is None:
            return None

        try:
            time = float(data.get("time") or 0)
            duration = float(data.get("duration") or 0)
            percentage = float(data.get("percentage") or 0)
        except (TypeError, ValueError):
            return None

        return cls(
            time=time,
            duration=duration,
            percentage=percentage,
            last_watched=last_watched,
            media_type=data.get("mediaType") or "movie",
            show_name=data.get("showName"),
            season=_optional_int(data.get("season")),
            episode=_optional_int(data.get("episode")),
        )

    @property
    def is_in_progress(self) -> bool:
        """True si 1 <= percentage < 95."""
        return IN_PROGRESS_MIN_PERCENTAGE <= self.percentage < COMPLETED_PERCENTAGE


def _optional_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class ContinueWatchingEntry:
    """
    Element a reprendre, tel que presente a l'interface.

    Attributs:
        media_id: Cle du store (film ou episode)
        record: Progression enregistree
        remaining_minutes: Minutes restantes, arrondies au superieur
    """

    media_id: str
    record: ProgressRecord
    remaining_minutes: int


@dataclass(frozen=True)
class NextEpisode:
    """Episode a lire ensuite (saison, episode)."""

    season: int
    episode: int
