"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- parsing/ : Classification des noms et sonde pymediainfo
- persistence/ : Stores JSON (caches, progression)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from mediatheque.adapters.file_system import FileSystemAdapter
from mediatheque.adapters.parsing.mediainfo_probe import MediaInfoProbe
from mediatheque.adapters.parsing.name_classifier import NameClassifier

__all__ = [
    "FileSystemAdapter",
    "MediaInfoProbe",
    "NameClassifier",
]
