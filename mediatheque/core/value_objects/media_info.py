"""
Objets valeur pour les informations média.

Objets valeur immutables représentant les métadonnées techniques des fichiers vidéo.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilité.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

_RESOLUTION_RE = re.compile(r"^(\d+)x(\d+)$")


@dataclass(frozen=True)
class Resolution:
    """
    Résolution vidéo (largeur x hauteur).

    Attributs :
        width : Résolution horizontale en pixels
        height : Résolution verticale en pixels

    Propriétés :
        label : Libellé lisible (4K, 1080p, 720p, SD)
    """

    width: int
    height: int

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Resolution"]:
        """Reconstruit une résolution depuis sa forme "1920x1080"."""
        if not value:
            return None
        match = _RESOLUTION_RE.match(value.strip())
        if not match:
            return None
        return cls(width=int(match.group(1)), height=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def label(self) -> str:
        """Libelle de qualite affiche dans le catalogue ; la largeur suffit pour un film recadre."""
        if self.height >= 2160 or self.width >= 3800:
            return "4K"
        elif self.height >= 1080 or self.width >= 1900:
            return "1080p"
        elif self.height >= 720 or self.width >= 1260:
            return "720p"
        else:
            return "SD"


@dataclass(frozen=True)
class TechnicalMetadata:
    """
    Métadonnées techniques d'un fichier vidéo, telles que mises en cache.

    Attributs :
        resolution : Résolution sous la forme "{largeur}x{hauteur}"
        duration : Durée arrondie en minutes
    """

    resolution: Optional[str] = None
    duration: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.resolution is None and self.duration is None

    def to_dict(self) -> dict[str, Any]:
        return {"resolution": self.resolution, "duration": self.duration}

    @classmethod
    def from_dict(cls, data: Any) -> Optional["TechnicalMetadata"]:
        """
        Relit une entrée du cache ; None si l'entrée n'est pas un objet.

        Une durée non numérique ou non finie (NaN, Infinity) est ignorée.
        """
        if not isinstance(data, dict):
            return None
        resolution = data.get("resolution")
        duration = data.get("duration")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            duration = None
        elif not math.isfinite(duration):
            duration = None
        return cls(
            resolution=str(resolution) if resolution is not None else None,
            duration=int(duration) if duration is not None else None,
        )
