"""
Tests unitaires pour FileSystemAdapter.

Utilisent de vrais fichiers sous tmp_path.
"""

from pathlib import Path

import pytest

from mediatheque.adapters.file_system import FileSystemAdapter


@pytest.fixture
def adapter() -> FileSystemAdapter:
    return FileSystemAdapter()


class TestListEntries:
    """Tests du listage des repertoires."""

    def test_lists_files_and_directories_sorted(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        (tmp_path / "b.MKV").write_bytes(b"12345")
        (tmp_path / "a_folder").mkdir()
        (tmp_path / "c.txt").write_text("x")

        entries = adapter.list_entries(tmp_path)

        assert [entry.name for entry in entries] == ["a_folder", "b.MKV", "c.txt"]
        folder, video, text = entries
        assert folder.is_directory is True
        assert folder.size is None
        assert video.is_directory is False
        assert video.size == 5
        assert video.extension == ".mkv"
        assert text.extension == ".txt"

    def test_missing_directory_raises(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        """Un repertoire absent leve OSError."""
        with pytest.raises(OSError):
            adapter.list_entries(tmp_path / "absent")

    def test_broken_symlink_is_listed_as_empty_file(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        (tmp_path / "dangling.mkv").symlink_to(tmp_path / "nowhere.mkv")

        entries = adapter.list_entries(tmp_path)

        assert len(entries) == 1
        assert entries[0].size == 0
        assert entries[0].is_directory is False


class TestGetSize:
    def test_get_size(self, adapter: FileSystemAdapter, tmp_path: Path) -> None:
        path = tmp_path / "movie.mkv"
        path.write_bytes(b"\x00" * 42)

        assert adapter.get_size(path) == 42

    def test_get_size_missing_file(self, adapter: FileSystemAdapter, tmp_path: Path) -> None:
        assert adapter.get_size(tmp_path / "absent.mkv") == 0
