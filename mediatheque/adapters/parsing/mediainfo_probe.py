"""
Implementation de la sonde technique avec pymediainfo.

Ce module fournit MediaInfoProbe qui implemente IMediaProbe pour lire
largeur, hauteur et duree des fichiers video.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from pymediainfo import MediaInfo as PyMediaInfo

from mediatheque.core.ports.probe import IMediaProbe, ProbeError, ProbeResult


class MediaInfoProbe(IMediaProbe):
    """
    Sonde utilisant pymediainfo.

    Les dimensions viennent de la premiere piste video, la duree de la
    piste generale.
    """

    def probe(self, file_path: Path) -> ProbeResult:
        """
        Sonde un fichier video.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            ProbeResult (champs a None si l'information est absente)

        Raises:
            ProbeError: fichier absent ou illisible par mediainfo
        """
        if not file_path.exists():
            raise ProbeError(file_path, "fichier introuvable")

        try:
            media_info = PyMediaInfo.parse(str(file_path), full=True)
        except Exception as exc:
            raise ProbeError(file_path, str(exc)) from exc

        video_tracks = [
            track for track in media_info.tracks if track.track_type == "Video"
        ]
        general_tracks = [
            track for track in media_info.tracks if track.track_type == "General"
        ]

        width, height = self._extract_dimensions(video_tracks)
        duration_seconds = self._extract_duration(general_tracks)

        logger.debug(
            f"Sonde {file_path.name}: {width}x{height}, {duration_seconds}s"
        )
        return ProbeResult(
            width=width, height=height, duration_seconds=duration_seconds
        )

    def _extract_dimensions(
        self, video_tracks: list
    ) -> tuple[Optional[int], Optional[int]]:
        if not video_tracks:
            return None, None

        track = video_tracks[0]
        if track.width is None or track.height is None:
            return None, None
        return int(track.width), int(track.height)

    def _extract_duration(self, general_tracks: list) -> Optional[float]:
        """
        Extrait la duree en SECONDES depuis la piste generale.

        pymediainfo retourne la duree en millisecondes.
        """
        if not general_tracks:
            return None

        duration_ms = general_tracks[0].duration
        if duration_ms is None:
            return None
        return float(duration_ms) / 1000
