"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- Resolution : Resolution video (largeur x hauteur)
- TechnicalMetadata : Resolution et duree mises en cache pour un fichier
- MediaType : Type de media (MOVIE, SERIES)
- ParsedName : Informations extraites du parsing d'un nom
- EpisodeMarker : Marqueur saison/episode brut
- MovieIdentity, ShowIdentity, EpisodeIdentity : Identites du store de progression
- ProgressRecord, ContinueWatchingEntry, NextEpisode : Progression de lecture
"""

from mediatheque.core.value_objects.identity import (
    EpisodeIdentity,
    ItemIdentity,
    MovieIdentity,
    ShowIdentity,
    item_key,
    parse_item_key,
)
from mediatheque.core.value_objects.media_info import (
    Resolution,
    TechnicalMetadata,
)
from mediatheque.core.value_objects.parsed_info import (
    EpisodeMarker,
    MediaType,
    ParsedName,
)
from mediatheque.core.value_objects.progress import (
    ContinueWatchingEntry,
    NextEpisode,
    ProgressRecord,
)

__all__ = [
    "Resolution",
    "TechnicalMetadata",
    "MediaType",
    "ParsedName",
    "EpisodeMarker",
    "MovieIdentity",
    "ShowIdentity",
    "EpisodeIdentity",
    "ItemIdentity",
    "item_key",
    "parse_item_key",
    "ProgressRecord",
    "ContinueWatchingEntry",
    "NextEpisode",
]
