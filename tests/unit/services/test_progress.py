"""
Tests pour ProgressStore - progression de lecture.

Couvre:
- Enregistrement et bornage du pourcentage
- Liste "reprendre la lecture" (seuils, tri, limite, minutes restantes)
- Episode suivant d'une serie
- Enregistrement d'une position rapportee par le lecteur
"""

from pathlib import Path

import pytest

from mediatheque.adapters.persistence.json_store import JsonFileStore
from mediatheque.core.entities.media import Episode, Season
from mediatheque.core.value_objects.identity import (
    EpisodeIdentity,
    MovieIdentity,
    ShowIdentity,
    item_key,
)
from mediatheque.core.value_objects.progress import NextEpisode
from mediatheque.services.progress import ProgressStore, clamp_percentage

DARK = ShowIdentity(title="Dark", year="2017")


def raw_record(percentage: float, last_watched: str, **extra) -> dict:
    """Enregistrement tel qu'il figure dans le fichier JSON."""
    return {
        "time": percentage * 36,
        "duration": 3600.0,
        "percentage": percentage,
        "lastWatched": last_watched,
        "mediaType": "movie",
        **extra,
    }


def episode_key(season: int, episode: int) -> str:
    return item_key(EpisodeIdentity(DARK, season, episode))


def seasons_of(layout: dict[int, list[int]]) -> list[Season]:
    return [
        Season(
            season_number=number,
            episodes=[
                Episode(episode_number=episode, path=Path(f"/videos/Dark/{number}/{episode}.mkv"))
                for episode in episodes
            ],
        )
        for number, episodes in layout.items()
    ]


@pytest.fixture
def progress(progress_file_store: JsonFileStore) -> ProgressStore:
    return ProgressStore(progress_file_store)


class TestSaveProgress:
    """Tests d'enregistrement."""

    def test_save_and_get(self, progress: ProgressStore):
        progress.save_progress("Vortex (2021)", time=600, duration=3600, percentage=16.6)

        record = progress.get_progress("Vortex (2021)")

        assert record.time == 600
        assert record.duration == 3600
        assert record.percentage == 16.6
        assert record.media_type == "movie"
        assert record.last_watched.tzinfo is not None

    def test_percentage_is_clamped(self, progress: ProgressStore):
        assert progress.save_progress("a", 1, 1, 150).percentage == 100.0
        assert progress.save_progress("b", 1, 1, -5).percentage == 0.0

    def test_clamp_percentage(self):
        assert clamp_percentage(42) == 42.0
        assert clamp_percentage(101) == 100.0

    def test_persisted_in_json_format(self, progress: ProgressStore, tmp_path: Path):
        progress.save_episode_progress(DARK, 1, 2, time=100, duration=3000, percentage=3.3)

        reloaded = JsonFileStore(tmp_path / "data" / "watch-progress.json")
        data = reloaded.get("Dark (2017)||S01E02")

        assert data["mediaType"] == "tvshow"
        assert data["showName"] == "Dark"
        assert data["season"] == 1
        assert data["episode"] == 2
        assert data["lastWatched"].endswith("Z")

    def test_remove_progress(self, progress: ProgressStore):
        progress.save_progress("a", 1, 10, 10)

        assert progress.remove_progress("a") is True
        assert progress.get_progress("a") is None
        assert progress.remove_progress("a") is False

    def test_get_episode_progress(self, progress: ProgressStore):
        progress.save_episode_progress(DARK, 2, 5, time=60, duration=600, percentage=10)

        assert progress.get_episode_progress(DARK, 2, 5).percentage == 10
        assert progress.get_episode_progress(DARK, 2, 6) is None


class TestContinueWatching:
    """Tests de la liste "reprendre la lecture"."""

    def test_thresholds_order_and_limit(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        """Seuls 1 <= % < 95 sont retenus, du plus recent au plus ancien, 3 au plus."""
        progress_file_store.set("old", raw_record(10, "2024-01-01T10:00:00.000Z"))
        progress_file_store.set("recent", raw_record(20, "2024-01-05T10:00:00.000Z"))
        progress_file_store.set("middle", raw_record(30, "2024-01-03T10:00:00.000Z"))
        progress_file_store.set("oldest", raw_record(40, "2023-12-01T10:00:00.000Z"))
        progress_file_store.set("barely", raw_record(0.5, "2024-02-01T10:00:00.000Z"))
        progress_file_store.set("done", raw_record(95, "2024-02-01T10:00:00.000Z"))

        entries = progress.get_continue_watching()

        assert [entry.media_id for entry in entries] == ["recent", "middle", "old"]

    def test_remaining_minutes_rounded_up(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        progress_file_store.set(
            "film",
            {
                "time": 1000.0,
                "duration": 3000.0,
                "percentage": 33.3,
                "lastWatched": "2024-01-01T00:00:00.000Z",
                "mediaType": "movie",
            },
        )

        entry = progress.get_continue_watching()[0]

        assert entry.remaining_minutes == 34

    def test_custom_limit(self, progress: ProgressStore, progress_file_store: JsonFileStore):
        for day in range(1, 6):
            progress_file_store.set(f"f{day}", raw_record(50, f"2024-01-0{day}T00:00:00Z"))

        assert len(progress.get_continue_watching(limit=5)) == 5

    def test_unreadable_records_are_skipped(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        progress_file_store.set("broken", {"percentage": 50})
        progress_file_store.set("not-a-dict", "oops")
        progress_file_store.set("ok", raw_record(50, "2024-01-01T00:00:00Z"))

        assert [entry.media_id for entry in progress.get_continue_watching()] == ["ok"]


class TestFindNextEpisode:
    """Tests de l'episode suivant."""

    LAYOUT = {1: [1, 2], 2: [1]}

    def test_nothing_watched_gives_first_episode(self, progress: ProgressStore):
        assert progress.find_next_episode(DARK, seasons_of(self.LAYOUT)) == NextEpisode(1, 1)

    def test_finished_episode_gives_next_in_season(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        progress_file_store.set(
            episode_key(1, 1), raw_record(96, "2024-01-01T00:00:00Z", mediaType="tvshow")
        )

        assert progress.find_next_episode(DARK, seasons_of(self.LAYOUT)) == NextEpisode(1, 2)

    def test_finished_last_of_season_gives_next_season(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        progress_file_store.set(
            episode_key(1, 2), raw_record(95, "2024-01-01T00:00:00Z", mediaType="tvshow")
        )

        assert progress.find_next_episode(DARK, seasons_of(self.LAYOUT)) == NextEpisode(2, 1)

    def test_finished_last_episode_gives_none(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        progress_file_store.set(
            episode_key(2, 1), raw_record(95, "2024-01-01T00:00:00Z", mediaType="tvshow")
        )

        assert progress.find_next_episode(DARK, seasons_of(self.LAYOUT)) is None

    def test_in_progress_episode_is_resumed(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        progress_file_store.set(
            episode_key(1, 1), raw_record(96, "2024-01-01T00:00:00Z", mediaType="tvshow")
        )
        progress_file_store.set(
            episode_key(1, 2), raw_record(40, "2024-01-02T00:00:00Z", mediaType="tvshow")
        )

        assert progress.find_next_episode(DARK, seasons_of(self.LAYOUT)) == NextEpisode(1, 2)

    def test_other_shows_are_ignored(
        self, progress: ProgressStore, progress_file_store: JsonFileStore
    ):
        other = item_key(EpisodeIdentity(ShowIdentity("Dark", None), 1, 1))
        progress_file_store.set(other, raw_record(96, "2024-01-01T00:00:00Z", mediaType="tvshow"))

        assert progress.find_next_episode(DARK, seasons_of(self.LAYOUT)) == NextEpisode(1, 1)

    def test_no_seasons(self, progress: ProgressStore):
        assert progress.find_next_episode(DARK, []) is None

    def test_unknown_season(self, progress: ProgressStore, progress_file_store: JsonFileStore):
        progress_file_store.set(
            episode_key(7, 1), raw_record(99, "2024-01-01T00:00:00Z", mediaType="tvshow")
        )

        assert progress.find_next_episode(DARK, seasons_of(self.LAYOUT)) is None


class TestRecordPlayback:
    """Tests des positions rapportees par le lecteur."""

    def test_movie_position_saved(self, progress: ProgressStore):
        record = progress.record_playback(MovieIdentity("Vortex (2021)"), time=900, duration=3600)

        assert record.percentage == 25.0
        assert progress.get_progress("Vortex (2021)").time == 900

    def test_episode_position_saved_with_show_details(self, progress: ProgressStore):
        progress.record_playback(EpisodeIdentity(DARK, 1, 3), time=300, duration=1200)

        record = progress.get_episode_progress(DARK, 1, 3)
        assert record.media_type == "tvshow"
        assert record.show_name == "Dark"
        assert record.percentage == 25.0

    def test_completed_playback_removes_record(self, progress: ProgressStore):
        identity = MovieIdentity("Vortex (2021)")
        progress.record_playback(identity, time=600, duration=3600)

        assert progress.record_playback(identity, time=3500, duration=3600) is None
        assert progress.get_progress("Vortex (2021)") is None

    def test_zero_duration(self, progress: ProgressStore):
        record = progress.record_playback(MovieIdentity("x"), time=10, duration=0)

        assert record.percentage == 0.0
