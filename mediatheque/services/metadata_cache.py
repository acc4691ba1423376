"""
Caches de metadonnees derivees.

Deux espaces de noms, chacun adosse a son propre JsonFileStore :
- TechnicalMetadataCache : resolution et duree par chemin de fichier video
- RemoteMetadataCache : reponses du service de metadonnees distant

Les entrees n'expirent jamais.
"""

import asyncio
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from mediatheque.adapters.persistence.json_store import JsonFileStore
from mediatheque.core.ports.api_clients import IMetadataLookup, LookupResult
from mediatheque.core.ports.probe import IMediaProbe, ProbeError
from mediatheque.core.value_objects.media_info import TechnicalMetadata
from mediatheque.core.value_objects.progress import format_timestamp, utc_now
from mediatheque.utils.constants import NO_YEAR

REMOTE_KEY_SEPARATOR = "||"


class TechnicalMetadataCache:
    """
    Cache des metadonnees techniques, indexe par chemin absolu du fichier.

    En lecture traversante, la sonde n'est appelee qu'en cas d'absence ;
    un echec de sonde n'est jamais mis en cache.
    """

    def __init__(self, store: JsonFileStore, probe: IMediaProbe) -> None:
        self._store = store
        self._probe = probe

    @staticmethod
    def _key(path: Path) -> str:
        return str(Path(path).absolute())

    def get(self, path: Path) -> Optional[TechnicalMetadata]:
        return TechnicalMetadata.from_dict(self._store.get(self._key(path)))

    def set(self, path: Path, metadata: TechnicalMetadata) -> None:
        self._store.set(self._key(path), metadata.to_dict())

    def get_or_probe(self, path: Path) -> TechnicalMetadata:
        """
        Retourne les metadonnees en cache, sinon sonde le fichier.

        Returns:
            Les metadonnees ; un TechnicalMetadata vide si la sonde echoue
        """
        cached = self.get(path)
        if cached is not None:
            return cached

        try:
            result = self._probe.probe(Path(path))
        except ProbeError as exc:
            logger.warning(f"{exc}")
            return TechnicalMetadata()

        metadata = TechnicalMetadata(
            resolution=result.resolution, duration=result.duration_minutes
        )
        self.set(path, metadata)
        return metadata


class RemoteMetadataCache:
    """
    Cache des metadonnees distantes (titre, annee, type, saison, episode).

    Format de cle : "type||titre normalise||annee[||S01[E02]]", le prefixe
    de type etant omis quand aucun type n'est precise.
    """

    def __init__(
        self, store: JsonFileStore, lookup: Optional[IMetadataLookup] = None
    ) -> None:
        self._store = store
        self._lookup = lookup

    @staticmethod
    def cache_key(
        title: str,
        year: Optional[Any] = None,
        media_type: Optional[str] = None,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> str:
        key = REMOTE_KEY_SEPARATOR.join(
            (title.lower().strip(), str(year) if year else NO_YEAR)
        )
        if media_type:
            key = f"{media_type}{REMOTE_KEY_SEPARATOR}{key}"
        if season is not None:
            key += f"{REMOTE_KEY_SEPARATOR}S{season:02d}"
            if episode is not None:
                key += f"E{episode:02d}"
        return key

    def get(
        self,
        title: str,
        year: Optional[Any] = None,
        media_type: Optional[str] = None,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> Optional[dict[str, Any]]:
        value = self._store.get(self.cache_key(title, year, media_type, season, episode))
        return value if isinstance(value, dict) else None

    def set(
        self,
        title: str,
        year: Optional[Any],
        metadata: dict[str, Any],
        media_type: Optional[str] = None,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> None:
        """Enregistre les metadonnees, horodatees par cachedAt."""
        key = self.cache_key(title, year, media_type, season, episode)
        self._store.set(key, {**metadata, "cachedAt": format_timestamp(utc_now())})

    async def fetch(
        self,
        title: str,
        year: Optional[Any] = None,
        media_type: Optional[str] = None,
    ) -> LookupResult:
        """
        Retourne les metadonnees en cache, sinon interroge le service distant.

        Une reponse de repli (aucune correspondance) n'est pas mise en cache.
        La reponse est enregistree sous le type demande et, s'il differe,
        sous le type detecte par le service.
        """
        loop = asyncio.get_running_loop()
        cached = await loop.run_in_executor(None, self.get, title, year, media_type)
        if cached is not None:
            logger.debug(f"Metadonnees distantes en cache: {title} ({year})")
            return LookupResult(metadata=cached, media_type=media_type)

        if self._lookup is None:
            logger.debug("Aucun service de metadonnees distant configure")
            return LookupResult(fallback=True)

        result = await self._lookup.lookup(title, year, media_type)
        if result.fallback or result.metadata is None:
            logger.debug(f"Aucune correspondance distante pour {title} ({year})")
            return result

        await loop.run_in_executor(
            None, self.set, title, year, result.metadata, media_type
        )
        if result.media_type and result.media_type != media_type:
            await loop.run_in_executor(
                None, self.set, title, year, result.metadata, result.media_type
            )
        return result
