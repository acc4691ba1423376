"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports système de fichiers :
- IFileSystem : Listage des répertoires et taille des fichiers

Ports parsing et sonde :
- INameClassifier : Classification des noms de fichiers et dossiers
- IMediaProbe : Lecture des dimensions et de la durée d'un fichier vidéo

Ports client API :
- IMetadataLookup : Recherche de métadonnées distantes
"""

from mediatheque.core.ports.api_clients import IMetadataLookup, LookupResult
from mediatheque.core.ports.file_system import IFileSystem
from mediatheque.core.ports.parser import INameClassifier
from mediatheque.core.ports.probe import (
    IMediaProbe,
    ProbeError,
    ProbeResult,
    ProbeTimeoutError,
)

__all__ = [
    # Système de fichiers
    "IFileSystem",
    # Parsing et sonde
    "INameClassifier",
    "IMediaProbe",
    "ProbeResult",
    "ProbeError",
    "ProbeTimeoutError",
    # Clients API
    "IMetadataLookup",
    "LookupResult",
]
