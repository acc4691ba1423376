"""
Tests d'integration pour le scanner avec les vrais adaptateurs.

Ces tests utilisent les implementations reelles du systeme de fichiers, du
classifieur et des stores JSON sur une arborescence temporaire. Seule la
sonde technique est simulee (les fichiers crees ne sont pas de vraies videos).
"""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dependency_injector import providers

from mediatheque.config import Settings
from mediatheque.container import Container
from mediatheque.core.value_objects.identity import EpisodeIdentity, ShowIdentity
from mediatheque.core.value_objects.progress import NextEpisode


def touch(path: Path, size: int = 16) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\0" * size)
    return path


@pytest.fixture
def library(test_settings: Settings) -> Path:
    """Arborescence representative de la bibliotheque."""
    root = test_settings.library_dir
    touch(root / "Some.Movie.2019.1080p.BluRay.x264.mkv", size=64)
    touch(root / "Vortex (2021)" / "vortex.cd1.mkv", size=16)
    touch(root / "Vortex (2021)" / "vortex.cd2.MKV", size=32)
    touch(root / "Vortex (2021)" / "vortex.nfo")
    touch(root / "Dark (2017)" / "Season 1" / "Dark.S01E01.720p.mkv")
    touch(root / "Dark (2017)" / "Season 1" / "Dark.S01E02.720p.mkv")
    touch(root / "Dark (2017)" / "Season 2" / "Dark.S02E01.720p.mkv")
    touch(root / "Suits.S02" / "Suits.E01.mkv")
    (root / "Vide").mkdir()
    return root


@pytest.fixture
def container(test_settings: Settings, mock_probe: MagicMock):
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.media_probe.override(providers.Object(mock_probe))
    yield container
    container.reset_singletons()
    container.reset_override()


class TestScannerIntegrationFlow:
    """Tests d'integration du flow complet : scan, regroupement, progression."""

    def test_full_catalog(self, container: Container, library: Path):
        catalog = container.library_service().build_catalog(library)

        assert catalog.success is True
        assert sorted((movie.title, movie.year) for movie in catalog.movies) == [
            ("Some Movie", "2019"),
            ("Vortex", "2021"),
        ]
        vortex = next(movie for movie in catalog.movies if movie.title == "Vortex")
        assert sorted(video.name for video in vortex.files) == ["vortex.cd1.mkv", "vortex.cd2.MKV"]

        shows = {(show.title, show.year): show for show in catalog.shows}
        assert set(shows) == {("Dark", "2017"), ("Suits", None)}
        dark = shows[("Dark", "2017")]
        assert [season.season_number for season in dark.seasons] == [1, 2]
        assert dark.episode_count == 3
        assert shows[("Suits", None)].seasons[0].season_number == 2

    def test_technical_cache_is_persisted(
        self, container: Container, library: Path, test_settings: Settings, mock_probe: MagicMock
    ):
        container.library_service().build_catalog(library)
        probes = mock_probe.probe.call_count

        cache = json.loads(test_settings.metadata_cache_file.read_text(encoding="utf-8"))

        assert len(cache) == probes
        assert all(entry == {"resolution": "1920x1080", "duration": 120} for entry in cache.values())

    def test_progress_drives_next_episode(
        self, container: Container, library: Path, test_settings: Settings
    ):
        catalog = container.library_service().build_catalog(library)
        dark = next(show for show in catalog.shows if show.title == "Dark")
        identity = ShowIdentity(title=dark.title, year=dark.year)
        progress = container.progress_store()
        container.progress_file_store().set(
            "Dark (2017)||S01E01",
            {
                "time": 1000.0,
                "duration": 3000.0,
                "percentage": 33.3,
                "lastWatched": "2024-01-01T20:00:00.000Z",
                "mediaType": "tvshow",
            },
        )
        assert progress.find_next_episode(identity, dark.seasons) == NextEpisode(1, 1)

        progress.save_episode_progress(identity, 1, 2, time=2900, duration=3000, percentage=97)
        assert progress.find_next_episode(identity, dark.seasons) == NextEpisode(2, 1)

        assert progress.record_playback(EpisodeIdentity(identity, 1, 1), time=2950, duration=3000) is None
        stored = json.loads(test_settings.progress_file.read_text(encoding="utf-8"))
        assert "Dark (2017)||S01E01" not in stored
        assert stored["Dark (2017)||S01E02"]["mediaType"] == "tvshow"

    def test_missing_root(self, container: Container, tmp_path: Path):
        catalog = container.library_service().build_catalog(tmp_path / "absent")

        assert catalog.success is False
        assert catalog.outcome.error
