"""
Interfaces ports pour le service de métadonnées distant.

Le client réseau (recherche titre/année) est un collaborateur externe : seul
son contrat est défini ici. Ses réponses sont mémorisées dans le cache de
métadonnées distantes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class LookupResult:
    """
    Réponse du service de métadonnées distant.

    Attributs :
        metadata : Métadonnées trouvées (objet JSON), None en cas de repli
        media_type : Type détecté par le service ("movie" ou "tvshow")
        fallback : True si aucune correspondance n'a été trouvée
    """

    metadata: Optional[dict[str, Any]] = None
    media_type: Optional[str] = None
    fallback: bool = False


class IMetadataLookup(ABC):
    """
    Interface du service de recherche de métadonnées (titre, année).
    """

    @abstractmethod
    async def lookup(
        self,
        title: str,
        year: Optional[str] = None,
        media_type: Optional[str] = None,
    ) -> LookupResult:
        """
        Recherche les métadonnées d'un film ou d'une série.

        Args :
            title : Titre recherché
            year : Année optionnelle pour affiner la recherche
            media_type : "movie", "tvshow" ou None pour une détection automatique

        Retourne :
            LookupResult ; fallback=True si rien n'a été trouvé
        """
        ...
