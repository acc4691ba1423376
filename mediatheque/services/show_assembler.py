"""
Regroupement des episodes a plat en series, saisons et episodes.
"""

from typing import Optional

from loguru import logger

from mediatheque.core.entities.media import Episode, Season, TVShow
from mediatheque.core.entities.video import FlatEpisode
from mediatheque.utils.constants import NO_YEAR


class ShowAssembler:
    """
    Assemble les episodes produits par le scanner en series.

    Seuls les episodes parses, titres et avec une saison sont regroupes. Les
    autres, ainsi que les doublons (serie, saison, episode), sont ecartes et
    comptes dans last_dropped. Le premier episode rencontre l'emporte.

    Le tri est stable : une meme entree donne toujours la meme sortie.
    """

    def __init__(self) -> None:
        self.last_dropped = 0

    @staticmethod
    def show_key(title: str, year: Optional[str]) -> str:
        return f"{title}||{year or NO_YEAR}"

    @staticmethod
    def season_key(season: int) -> str:
        return f"S{season:02d}"

    def assemble(self, flat_episodes: list[FlatEpisode]) -> list[TVShow]:
        """
        Regroupe les episodes par serie puis par saison.

        Args:
            flat_episodes: Episodes a plat, dans l'ordre du scan

        Returns:
            Series dans l'ordre de premiere apparition, saisons et episodes
            tries par numero croissant
        """
        shows: dict[str, TVShow] = {}
        seasons: dict[str, dict[str, Season]] = {}
        seen: set[tuple[str, int, Optional[int]]] = set()
        dropped = 0

        for flat in flat_episodes:
            if not flat.parsed or not flat.title or flat.season is None:
                dropped += 1
                logger.debug(f"Episode non regroupable ignore: {flat.original_name}")
                continue

            key = self.show_key(flat.title, flat.year)
            identity = (key, flat.season, flat.episode)
            if identity in seen:
                dropped += 1
                logger.debug(f"Episode en double ignore: {flat.original_name}")
                continue
            seen.add(identity)

            if key not in shows:
                shows[key] = TVShow(
                    title=flat.title, year=flat.year, original_name=flat.original_name
                )
                seasons[key] = {}

            show_seasons = seasons[key]
            season_key = self.season_key(flat.season)
            if season_key not in show_seasons:
                show_seasons[season_key] = Season(season_number=flat.season)

            show_seasons[season_key].episodes.append(
                Episode(
                    episode_number=flat.episode if flat.episode is not None else 0,
                    path=flat.path,
                    episode_end=flat.episode_end,
                    episode_title=flat.episode_title,
                    files=list(flat.files),
                    resolution=flat.resolution,
                    duration=flat.duration,
                    original_name=flat.original_name,
                )
            )

        for key, show in shows.items():
            show.seasons = sorted(seasons[key].values(), key=lambda season: season.season_number)
            for season in show.seasons:
                season.episodes.sort(key=lambda episode: episode.episode_number)

        self.last_dropped = dropped
        if dropped:
            logger.debug(f"{dropped} episodes ecartes lors du regroupement")
        return list(shows.values())
