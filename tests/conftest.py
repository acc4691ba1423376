"""
Fixtures pytest partagees pour les tests de la mediatheque.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, INameClassifier, IMediaProbe, IMetadataLookup)
- Settings de test avec chemins temporaires
- Stores JSON temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from mediatheque.adapters.parsing.name_classifier import NameClassifier
from mediatheque.adapters.persistence.json_store import JsonFileStore
from mediatheque.config import Settings
from mediatheque.core.ports.api_clients import IMetadataLookup, LookupResult
from mediatheque.core.ports.file_system import IFileSystem
from mediatheque.core.ports.parser import INameClassifier
from mediatheque.core.ports.probe import IMediaProbe, ProbeResult


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    list_entries retourne une liste vide par defaut ; configurer
    un side_effect dans chaque test pour simuler une arborescence.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.list_entries.return_value = []
    mock.get_size.return_value = 500 * 1024 * 1024  # 500 MB par defaut
    return mock


@pytest.fixture
def classifier() -> NameClassifier:
    """Classifieur reel : pur, sans dependance externe."""
    return NameClassifier()


@pytest.fixture
def mock_classifier() -> MagicMock:
    """Mock de INameClassifier, a configurer dans chaque test."""
    return MagicMock(spec=INameClassifier)


@pytest.fixture
def mock_probe() -> MagicMock:
    """
    Mock de IMediaProbe pour les tests.

    Retourne un fichier 1080p de 2 heures par defaut.
    """
    mock = MagicMock(spec=IMediaProbe)
    mock.probe.return_value = ProbeResult(width=1920, height=1080, duration_seconds=7200.0)
    return mock


@pytest.fixture
def mock_lookup() -> MagicMock:
    """Mock de IMetadataLookup avec une methode lookup asynchrone."""
    mock = MagicMock(spec=IMetadataLookup)
    mock.lookup = AsyncMock(
        return_value=LookupResult(
            metadata={"director": "Jane Doe", "overview": "Un film."},
            media_type="movie",
        )
    )
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler bibliotheque, donnees et logs.
    """
    library_dir = tmp_path / "library"
    data_dir = tmp_path / "data"
    library_dir.mkdir(parents=True)

    return Settings(
        _env_file=None,
        library_dir=library_dir,
        data_dir=data_dir,
        log_file=tmp_path / "logs" / "test.log",
        scan_workers=2,
        probe_timeout_seconds=5.0,
    )


@pytest.fixture
def metadata_store(tmp_path: Path) -> JsonFileStore:
    """Store JSON temporaire pour le cache technique."""
    return JsonFileStore(tmp_path / "data" / "metadata-cache.json")


@pytest.fixture
def progress_file_store(tmp_path: Path) -> JsonFileStore:
    """Store JSON temporaire pour la progression."""
    return JsonFileStore(tmp_path / "data" / "watch-progress.json")
