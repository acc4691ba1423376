"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI. Chaque fichier
persiste (cache technique, cache distant, progression) a un unique store
singleton.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.mediainfo_probe import MediaInfoProbe
from .adapters.parsing.name_classifier import NameClassifier
from .adapters.persistence.json_store import JsonFileStore
from .config import Settings
from .services.library import LibraryService
from .services.metadata_cache import RemoteMetadataCache, TechnicalMetadataCache
from .services.progress import ProgressStore
from .services.scanner import LibraryScanner
from .services.show_assembler import ShowAssembler


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        scanner = container.scanner()
        progress = container.progress_store()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    classifier = providers.Singleton(NameClassifier)
    media_probe = providers.Singleton(MediaInfoProbe)

    # Stores - un par fichier
    metadata_store = providers.Singleton(
        JsonFileStore, path=config.provided.metadata_cache_file
    )
    remote_store = providers.Singleton(
        JsonFileStore, path=config.provided.remote_cache_file
    )
    progress_file_store = providers.Singleton(
        JsonFileStore, path=config.provided.progress_file
    )

    # Caches et progression
    technical_cache = providers.Singleton(
        TechnicalMetadataCache, store=metadata_store, probe=media_probe
    )
    remote_cache = providers.Singleton(RemoteMetadataCache, store=remote_store)
    progress_store = providers.Singleton(ProgressStore, store=progress_file_store)

    # Services
    scanner = providers.Factory(
        LibraryScanner,
        file_system=file_system,
        classifier=classifier,
        metadata_cache=technical_cache,
        settings=config,
    )
    show_assembler = providers.Factory(ShowAssembler)
    library_service = providers.Factory(
        LibraryService,
        scanner=scanner,
        assembler=show_assembler,
    )
