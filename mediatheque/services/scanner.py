"""
Service de scan de la bibliotheque video.

Transforme une arborescence de fichiers en films et episodes a plat en
coordonnant le systeme de fichiers, le classifieur de noms et le cache
des metadonnees techniques.

Structures reconnues sous la racine:
    Film.mkv                                  -> film (video racine)
    Show.Name.S01E01.mkv                      -> episode (video racine)
    Film (2021)/film.mkv                      -> film
    Show (2020)/Show.S01E01.mkv               -> serie, disposition a plat
    Show (2020)/Season 01/Show.S01E01.mkv     -> serie, disposition imbriquee
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeoutError
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Optional, Sequence

from loguru import logger

from mediatheque.config import Settings
from mediatheque.core.entities.media import Movie
from mediatheque.core.entities.video import FlatEpisode, RawEntry, VideoFile
from mediatheque.core.ports.file_system import IFileSystem
from mediatheque.core.ports.parser import INameClassifier
from mediatheque.core.ports.probe import ProbeTimeoutError
from mediatheque.core.value_objects.media_info import TechnicalMetadata
from mediatheque.core.value_objects.parsed_info import ParsedName
from mediatheque.services.metadata_cache import TechnicalMetadataCache
from mediatheque.utils.constants import VIDEO_EXTENSIONS


@dataclass(frozen=True)
class ScanProgress:
    """Avancement du scan : elements racine traites sur le total."""

    current: int
    total: int


ProgressCallback = Callable[[ScanProgress], None]


@dataclass
class ScanOutcome:
    """
    Resultat d'un scan.

    Attributs:
        success: False si la racine est illisible ou si le scan a ete annule
        movies: Films trouves, dans l'ordre des entrees racine
        episodes: Episodes a plat, a regrouper avec ShowAssembler
        error: Message d'erreur quand success=False
        cancelled: True si le scan a ete interrompu
    """

    success: bool
    movies: list[Movie] = field(default_factory=list)
    episodes: list[FlatEpisode] = field(default_factory=list)
    error: Optional[str] = None
    cancelled: bool = False


@dataclass(frozen=True)
class PlaybackTarget:
    """Fichier a transmettre au lecteur."""

    path: Path
    uri: str
    name: str
    size: int


def select_playback_file(files: Sequence[VideoFile]) -> Optional[PlaybackTarget]:
    """
    Choisit le plus gros fichier video d'un element et construit son URI.

    Returns:
        PlaybackTarget, ou None si la liste est vide
    """
    if not files:
        return None
    largest = max(files, key=lambda video: video.size)
    posix_path = str(largest.path).replace("\\", "/").lstrip("/")
    return PlaybackTarget(
        path=largest.path,
        uri=f"file:///{posix_path}",
        name=largest.name,
        size=largest.size,
    )


def is_video_entry(entry: RawEntry) -> bool:
    return not entry.is_directory and (entry.extension or "").lower() in VIDEO_EXTENSIONS


@dataclass
class _ItemResult:
    movies: list[Movie] = field(default_factory=list)
    episodes: list[FlatEpisode] = field(default_factory=list)


class _ProgressTracker:
    """Compteur monotone qui notifie le callback sans jamais propager ses erreurs."""

    def __init__(self, total: int, callback: Optional[ProgressCallback]) -> None:
        self._total = total
        self._callback = callback
        self._current = 0
        self._lock = threading.Lock()

    def advance(self) -> None:
        with self._lock:
            self._current += 1
            progress = ScanProgress(current=self._current, total=self._total)
        if self._callback is None:
            return
        try:
            self._callback(progress)
        except Exception as exc:
            logger.warning(f"Callback de progression en erreur: {exc}")


class LibraryScanner:
    """
    Service orchestrant le scan de la bibliotheque.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister les repertoires
    - Le classifieur (INameClassifier) pour extraire titres et episodes
    - Le cache technique (TechnicalMetadataCache) pour resolution et duree

    Les elements racine sont traites en parallele ; chaque sonde est
    bornee par probe_timeout_seconds.
    """

    def __init__(
        self,
        file_system: IFileSystem,
        classifier: INameClassifier,
        metadata_cache: TechnicalMetadataCache,
        settings: Settings,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour le listage
            classifier: Implementation de INameClassifier pour le parsing
            metadata_cache: Cache des metadonnees techniques (avec sonde)
            settings: Configuration (nombre de workers, delai de sonde)
        """
        self._file_system = file_system
        self._classifier = classifier
        self._metadata_cache = metadata_cache
        self._settings = settings

    def scan(
        self,
        root_path: Path,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> ScanOutcome:
        """
        Scanne la racine de la bibliotheque.

        Args:
            root_path: Repertoire racine
            on_progress: Callback appele apres chaque element racine
            cancel_event: Evenement d'annulation, verifie avant chaque element

        Returns:
            ScanOutcome ; ne leve jamais d'exception
        """
        root_path = Path(root_path)
        try:
            entries = self._file_system.list_entries(root_path)
        except OSError as exc:
            logger.error(f"Racine illisible {root_path}: {exc}")
            return ScanOutcome(
                success=False, error=f"Impossible de lire {root_path}: {exc}"
            )

        items = [entry for entry in entries if entry.is_directory or is_video_entry(entry)]
        tracker = _ProgressTracker(len(items), on_progress)
        results: list[Optional[_ItemResult]] = [None] * len(items)
        workers = max(1, self._settings.scan_workers)

        logger.info(f"Scan de {root_path}: {len(items)} elements, {workers} workers")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scan") as pool:
            futures = {
                pool.submit(self._process_item, entry, cancel_event): index
                for index, entry in enumerate(items)
            }
            for future in as_completed(futures):
                result = future.result()
                results[futures[future]] = result
                if result is not None:
                    tracker.advance()

        outcome = ScanOutcome(success=True)
        for result in results:
            if result is None:
                continue
            outcome.movies.extend(result.movies)
            outcome.episodes.extend(result.episodes)

        if cancel_event is not None and cancel_event.is_set():
            logger.info("Scan annule")
            outcome.success = False
            outcome.cancelled = True
            outcome.error = "Scan annule"

        logger.info(
            f"Scan termine: {len(outcome.movies)} films, {len(outcome.episodes)} episodes"
        )
        return outcome

    def _process_item(
        self,
        entry: RawEntry,
        cancel_event: Optional[threading.Event],
    ) -> Optional[_ItemResult]:
        """Traite un element racine ; None s'il a ete saute par annulation."""
        if cancel_event is not None and cancel_event.is_set():
            return None
        try:
            if entry.is_directory:
                return self._process_folder(entry)
            return self._process_root_video(entry)
        except Exception as exc:
            logger.exception(f"Erreur inattendue sur {entry.path}: {exc}")
            return _ItemResult()

    def _process_root_video(self, entry: RawEntry) -> _ItemResult:
        parsed = self._classifier.classify(entry.name)
        metadata = self._read_metadata(entry.path)
        video = self._video_file(entry)

        # Un marqueur sans titre donne un episode non regroupable, pas un film
        if self._classifier.match_episode(entry.name) is not None:
            return _ItemResult(
                episodes=[self._flat_episode(parsed, entry.path, [video], metadata)]
            )

        movie = Movie(
            title=parsed.title,
            year=parsed.year,
            path=entry.path,
            files=[video],
            resolution=metadata.resolution,
            duration=metadata.duration,
            original_name=entry.name,
            is_root_video=True,
        )
        return _ItemResult(movies=[movie])

    def _process_folder(self, folder: RawEntry) -> _ItemResult:
        try:
            children = self._file_system.list_entries(folder.path)
        except OSError as exc:
            logger.warning(f"Dossier illisible {folder.path}: {exc}")
            return _ItemResult()

        videos = [child for child in children if is_video_entry(child)]
        season_folders = self._season_folders(children)

        if season_folders and self._has_nested_episodes(folder, videos, season_folders):
            return self._build_nested_show(folder, videos, season_folders)

        if any(self._classifier.match_episode(video.name, folder.name) for video in videos):
            return self._build_flat_show(folder, videos)

        if videos:
            return _ItemResult(movies=[self._build_folder_movie(folder, videos)])

        logger.debug(f"Aucune video dans {folder.name}, dossier ignore")
        return _ItemResult()

    def _season_folders(
        self, children: list[RawEntry]
    ) -> list[tuple[int, RawEntry, list[RawEntry]]]:
        """Sous-dossiers de saison avec leur numero et leurs videos."""
        seasons = []
        for child in children:
            if not child.is_directory:
                continue
            season_number = self._classifier.extract_season_number(child.name)
            if season_number is None:
                continue
            try:
                season_entries = self._file_system.list_entries(child.path)
            except OSError as exc:
                logger.warning(f"Dossier de saison illisible {child.path}: {exc}")
                continue
            season_videos = [entry for entry in season_entries if is_video_entry(entry)]
            seasons.append((season_number, child, season_videos))
        return seasons

    def _has_nested_episodes(
        self,
        folder: RawEntry,
        videos: list[RawEntry],
        season_folders: list[tuple[int, RawEntry, list[RawEntry]]],
    ) -> bool:
        if any(self._classifier.match_episode(video.name, folder.name) for video in videos):
            return True
        return any(
            self._classifier.match_episode(video.name, season_folder.name)
            for _, season_folder, season_videos in season_folders
            for video in season_videos
        )

    def _build_nested_show(
        self,
        folder: RawEntry,
        videos: list[RawEntry],
        season_folders: list[tuple[int, RawEntry, list[RawEntry]]],
    ) -> _ItemResult:
        show_info = self._classifier.classify_show_folder(folder.name)
        result = _ItemResult()

        for video in videos:
            episode = self._build_episode(video, folder.name, show_info, None)
            if episode is not None:
                result.episodes.append(episode)

        for season_number, season_folder, season_videos in season_folders:
            for video in season_videos:
                episode = self._build_episode(
                    video, season_folder.name, show_info, season_number
                )
                if episode is not None:
                    result.episodes.append(episode)

        logger.debug(f"Serie imbriquee {folder.name}: {len(result.episodes)} episodes")
        return result

    def _build_flat_show(self, folder: RawEntry, videos: list[RawEntry]) -> _ItemResult:
        show_info = self._classifier.classify_show_folder(folder.name)
        result = _ItemResult()
        for video in videos:
            episode = self._build_episode(video, folder.name, show_info, None)
            if episode is not None:
                result.episodes.append(episode)
        logger.debug(f"Serie a plat {folder.name}: {len(result.episodes)} episodes")
        return result

    def _build_episode(
        self,
        video: RawEntry,
        parent_name: str,
        show_info: ParsedName,
        season_override: Optional[int],
    ) -> Optional[FlatEpisode]:
        """
        Construit un episode a plat depuis un fichier de serie.

        Le titre et l'annee absents du nom de fichier sont repris du dossier
        de la serie ; le numero du dossier de saison remplace celui du fichier.

        Returns:
            FlatEpisode, ou None si le fichier ne porte aucun marqueur d'episode
        """
        marker = self._classifier.match_episode(video.name, parent_name)
        if marker is None:
            return None

        parsed = self._classifier.classify(video.name, parent_name)
        if not parsed.parsed:
            parsed = ParsedName(
                title=show_info.title,
                original_name=video.name,
                year=show_info.year,
                season=marker.season,
                episode=marker.episode,
                episode_end=marker.episode_end,
                parsed=True,
            )
        elif parsed.year is None and show_info.parsed and show_info.year:
            parsed = replace(parsed, year=show_info.year)

        if season_override is not None and parsed.season != season_override:
            parsed = replace(parsed, season=season_override)

        metadata = self._read_metadata(video.path)
        return self._flat_episode(parsed, video.path, [self._video_file(video)], metadata)

    def _build_folder_movie(self, folder: RawEntry, videos: list[RawEntry]) -> Movie:
        """
        Construit un film depuis un dossier.

        Le nom du dossier est prioritaire ; s'il n'est pas reconnu, le nom
        du plus gros fichier est utilise quand il se parse.
        """
        files = [self._video_file(video) for video in videos]
        largest = max(files, key=lambda video: video.size)

        info = self._classifier.classify_folder(folder.name)
        if not info.parsed:
            from_file = self._classifier.classify(largest.name)
            if from_file.parsed:
                info = from_file

        metadata = self._read_metadata(largest.path)
        return Movie(
            title=info.title,
            year=info.year,
            path=folder.path,
            files=files,
            resolution=metadata.resolution,
            duration=metadata.duration,
            original_name=folder.name,
        )

    def _video_file(self, entry: RawEntry) -> VideoFile:
        """VideoFile d'une entree ; la taille manquante est relue sur disque."""
        video = VideoFile.from_entry(entry)
        if entry.size is None:
            video = replace(video, size=self._file_system.get_size(entry.path))
        return video

    def _read_metadata(self, path: Path) -> TechnicalMetadata:
        """
        Lecture traversante du cache, bornee par le delai de sonde.

        Chaque sonde tourne dans son propre thread : le delai court a partir
        du demarrage effectif, et une sonde bloquee n'occupe que son thread.
        Tout echec laisse resolution et duree a None.
        """
        timeout = self._settings.probe_timeout_seconds
        future: Future = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(self._metadata_cache.get_or_probe(path))
            except Exception as exc:
                future.set_exception(exc)

        threading.Thread(target=run, name=f"probe-{path.name}", daemon=True).start()
        try:
            return future.result(timeout=timeout)
        except FuturesTimeoutError:
            future.cancel()
            logger.warning(f"{ProbeTimeoutError(path, timeout)}")
        except Exception as exc:
            logger.warning(f"Echec de lecture des metadonnees pour {path}: {exc}")
        return TechnicalMetadata()

    @staticmethod
    def _flat_episode(
        parsed: ParsedName,
        path: Path,
        files: list[VideoFile],
        metadata: TechnicalMetadata,
    ) -> FlatEpisode:
        return FlatEpisode(
            title=parsed.title,
            original_name=parsed.original_name,
            path=path,
            parsed=parsed.parsed,
            year=parsed.year,
            season=parsed.season,
            episode=parsed.episode,
            episode_end=parsed.episode_end,
            episode_title=parsed.episode_title,
            files=files,
            resolution=metadata.resolution,
            duration=metadata.duration,
        )

