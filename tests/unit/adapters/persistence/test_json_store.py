"""
Tests unitaires pour JsonFileStore.

Tests couvrant:
- Chargement paresseux et persistance complete du fichier
- Comportement "fail-open" sur fichier corrompu ou illisible
- Hook d'erreur injectable
"""

import json
from pathlib import Path
from unittest.mock import MagicMock

from mediatheque.adapters.persistence.json_store import JsonFileStore


class TestJsonFileStore:
    """Tests des operations de base."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "absent.json")

        assert len(store) == 0
        assert store.get("key") is None

    def test_set_persists_pretty_utf8(self, tmp_path: Path) -> None:
        """L'ecriture cree le dossier parent et garde les accents."""
        path = tmp_path / "nested" / "store.json"
        store = JsonFileStore(path)

        store.set("Amélie", {"resolution": "1920x1080", "duration": 122})

        content = path.read_text(encoding="utf-8")
        assert "Amélie" in content
        assert "\n  " in content
        assert json.loads(content) == {"Amélie": {"resolution": "1920x1080", "duration": 122}}

    def test_reload_from_disk(self, tmp_path: Path) -> None:
        """Un second store relit les valeurs ecrites par le premier."""
        path = tmp_path / "store.json"
        JsonFileStore(path).set("a", 1)

        store = JsonFileStore(path)

        assert store.get("a") == 1
        assert "a" in store
        assert store.keys() == ["a"]

    def test_delete(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        store = JsonFileStore(path)
        store.set("a", 1)

        assert store.delete("a") is True
        assert store.delete("a") is False
        assert json.loads(path.read_text(encoding="utf-8")) == {}

    def test_items_is_a_snapshot(self, tmp_path: Path) -> None:
        """items() peut etre parcouru pendant une modification du store."""
        store = JsonFileStore(tmp_path / "store.json")
        store.set("a", 1)
        store.set("b", 2)

        for key, _ in store.items():
            store.delete(key)

        assert len(store) == 0

    def test_lazy_load(self, tmp_path: Path) -> None:
        """Le fichier n'est lu qu'au premier acces puis reste en memoire."""
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"a": 1}), encoding="utf-8")
        store = JsonFileStore(path)

        assert store.get("a") == 1
        path.write_text(json.dumps({"a": 2}), encoding="utf-8")
        assert store.get("a") == 1

        store.reload()
        assert store.get("a") == 2


class TestJsonFileStoreFailOpen:
    """Tests du comportement sur erreur."""

    def test_corrupt_file_is_empty(self, tmp_path: Path) -> None:
        """Un JSON invalide donne un store vide et appelle le hook."""
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        on_error = MagicMock()

        store = JsonFileStore(path, on_error=on_error)

        assert len(store) == 0
        on_error.assert_called_once()
        assert on_error.call_args.args[0] == "load"

    def test_non_object_document_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        on_error = MagicMock()

        store = JsonFileStore(path, on_error=on_error)

        assert store.keys() == []
        on_error.assert_called_once()

    def test_corrupt_file_is_overwritten_on_next_save(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("garbage", encoding="utf-8")
        store = JsonFileStore(path, on_error=MagicMock())

        store.set("a", 1)

        assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}

    def test_save_failure_keeps_memory_state(self, tmp_path: Path) -> None:
        """Une ecriture impossible conserve l'etat en memoire."""
        blocker = tmp_path / "blocker"
        blocker.write_text("fichier, pas dossier", encoding="utf-8")
        on_error = MagicMock()
        store = JsonFileStore(blocker / "store.json", on_error=on_error)

        store.set("a", 1)

        assert store.get("a") == 1
        on_error.assert_called_once()
        assert on_error.call_args.args[0] == "save"
