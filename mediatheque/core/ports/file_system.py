"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour lister les
répertoires de la bibliothèque. Les implémentations (adaptateurs) fournissent
l'accès concret au système de fichiers.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from mediatheque.core.entities.video import RawEntry


class IFileSystem(ABC):
    """
    Interface pour les opérations de lecture sur le système de fichiers.

    Définit les opérations nécessaires au scan : listage d'un répertoire
    avec distinction fichier/dossier et taille des fichiers.
    """

    @abstractmethod
    def list_entries(self, directory: Path) -> list[RawEntry]:
        """
        Liste les enfants directs d'un répertoire.

        Args :
            directory : Répertoire à lister

        Retourne :
            Liste des entrées, triée par nom

        Lève :
            OSError : si le répertoire ne peut pas être lu
        """
        ...

    @abstractmethod
    def get_size(self, path: Path) -> int:
        """
        Récupère la taille du fichier en octets.

        Args :
            path : Chemin vers le fichier

        Retourne :
            Taille du fichier en octets, ou 0 si le fichier n'existe pas
        """
        ...
