"""
Store de progression de lecture.

Memorise la position de lecture des films et episodes, alimente la liste
"reprendre la lecture" et determine l'episode a lire ensuite.
"""

import math
from typing import Optional, Sequence

from loguru import logger

from mediatheque.adapters.persistence.json_store import JsonFileStore
from mediatheque.core.entities.media import Season
from mediatheque.core.value_objects.identity import (
    EpisodeIdentity,
    ItemIdentity,
    ShowIdentity,
    item_key,
    parse_item_key,
)
from mediatheque.core.value_objects.progress import (
    ContinueWatchingEntry,
    NextEpisode,
    ProgressRecord,
    utc_now,
)
from mediatheque.utils.constants import COMPLETED_PERCENTAGE, CONTINUE_WATCHING_LIMIT


def clamp_percentage(percentage: float) -> float:
    return max(0.0, min(100.0, float(percentage)))


class ProgressStore:
    """
    Progression de lecture indexee par cle d'identite (voir item_key).

    Un enregistrement illisible est ignore, jamais propage.
    """

    def __init__(self, store: JsonFileStore) -> None:
        self._store = store

    def get_progress(self, item_id: str) -> Optional[ProgressRecord]:
        return ProgressRecord.from_dict(self._store.get(item_id))

    def save_progress(
        self,
        item_id: str,
        time: float,
        duration: float,
        percentage: float,
        media_type: str = "movie",
        show_name: Optional[str] = None,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> ProgressRecord:
        """
        Enregistre la progression, horodatee a l'instant present (UTC).

        Le pourcentage est borne a [0, 100].
        """
        record = ProgressRecord(
            time=float(time),
            duration=float(duration),
            percentage=clamp_percentage(percentage),
            last_watched=utc_now(),
            media_type=media_type,
            show_name=show_name,
            season=season,
            episode=episode,
        )
        self._store.set(item_id, record.to_dict())
        return record

    def remove_progress(self, item_id: str) -> bool:
        return self._store.delete(item_id)

    def get_episode_progress(
        self, show: ShowIdentity, season: int, episode: int
    ) -> Optional[ProgressRecord]:
        return self.get_progress(item_key(EpisodeIdentity(show, season, episode)))

    def save_episode_progress(
        self,
        show: ShowIdentity,
        season: int,
        episode: int,
        time: float,
        duration: float,
        percentage: float,
    ) -> ProgressRecord:
        return self.save_progress(
            item_key(EpisodeIdentity(show, season, episode)),
            time,
            duration,
            percentage,
            media_type="tvshow",
            show_name=show.title,
            season=season,
            episode=episode,
        )

    def record_playback(
        self, identity: ItemIdentity, time: float, duration: float
    ) -> Optional[ProgressRecord]:
        """
        Enregistre une position de lecture rapportee par le lecteur.

        A partir de 95 %, l'element est considere comme vu et sa progression
        est supprimee.

        Returns:
            L'enregistrement sauvegarde, ou None s'il a ete supprime
        """
        percentage = (time / duration * 100) if duration > 0 else 0.0
        key = item_key(identity)

        if percentage >= COMPLETED_PERCENTAGE:
            self.remove_progress(key)
            logger.debug(f"Lecture terminee, progression supprimee: {key}")
            return None

        if isinstance(identity, EpisodeIdentity):
            return self.save_episode_progress(
                identity.show,
                identity.season,
                identity.episode,
                time,
                duration,
                percentage,
            )
        return self.save_progress(key, time, duration, percentage)

    def get_continue_watching(
        self, limit: int = CONTINUE_WATCHING_LIMIT
    ) -> list[ContinueWatchingEntry]:
        """
        Elements en cours (1 <= pourcentage < 95), du plus recent au plus ancien.

        Args:
            limit: Nombre maximum d'elements retournes

        Returns:
            Liste avec les minutes restantes arrondies au superieur
        """
        in_progress = [
            (item_id, record)
            for item_id, record in self._records()
            if record.is_in_progress
        ]
        in_progress.sort(key=lambda item: item[1].last_watched, reverse=True)

        return [
            ContinueWatchingEntry(
                media_id=item_id,
                record=record,
                remaining_minutes=math.ceil((record.duration - record.time) / 60),
            )
            for item_id, record in in_progress[:limit]
        ]

    def find_next_episode(
        self, show: ShowIdentity, seasons: Sequence[Season]
    ) -> Optional[NextEpisode]:
        """
        Determine l'episode a lire pour une serie.

        - Aucun episode vu : premier episode de la premiere saison.
        - Dernier episode vu termine (>= 95 %) : episode suivant de la saison,
          sinon premier episode de la saison suivante, sinon None.
        - Dernier episode vu en cours : ce meme episode (point de reprise).

        Args:
            show: Identite de la serie
            seasons: Saisons de la serie, triees par numero

        Returns:
            NextEpisode, ou None si rien n'est a lire
        """
        if not seasons:
            return None

        watched = [
            (item_id, record)
            for item_id, record in self._records()
            if item_id.startswith(show.key_prefix)
        ]

        if not watched:
            first_season = seasons[0]
            if not first_season.episodes:
                return None
            return NextEpisode(
                season=first_season.season_number,
                episode=first_season.episodes[0].episode_number,
            )

        watched.sort(key=lambda item: item[1].last_watched, reverse=True)
        last_id, last_record = watched[0]

        identity = parse_item_key(last_id, "tvshow")
        if not isinstance(identity, EpisodeIdentity):
            logger.debug(f"Cle d'episode illisible: {last_id}")
            return None

        if last_record.percentage < COMPLETED_PERCENTAGE:
            return NextEpisode(season=identity.season, episode=identity.episode)

        current = next(
            (season for season in seasons if season.season_number == identity.season),
            None,
        )
        if current is None:
            return None

        for candidate in current.episodes:
            if candidate.episode_number == identity.episode + 1:
                return NextEpisode(season=identity.season, episode=candidate.episode_number)

        following = next(
            (season for season in seasons if season.season_number == identity.season + 1),
            None,
        )
        if following is not None and following.episodes:
            return NextEpisode(
                season=following.season_number,
                episode=following.episodes[0].episode_number,
            )
        return None

    def _records(self) -> list[tuple[str, ProgressRecord]]:
        """Enregistrements decodables du store ; les autres sont ignores."""
        records = []
        for item_id, data in self._store.items():
            record = ProgressRecord.from_dict(data)
            if record is None:
                logger.debug(f"Progression illisible ignoree: {item_id}")
                continue
            records.append((item_id, record))
        return records
