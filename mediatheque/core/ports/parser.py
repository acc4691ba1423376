"""
Interface port pour la classification des noms de fichiers et dossiers.

Interface abstraite (port) definissant le contrat du classifieur utilise par
le scanner pour extraire titre, annee, saison et episode.
"""

from abc import ABC, abstractmethod
from typing import Optional

from mediatheque.core.value_objects.parsed_info import EpisodeMarker, ParsedName


class INameClassifier(ABC):
    """
    Interface pour la classification des noms de fichiers video.

    Aucune methode ne leve d'exception : un nom non reconnu produit un
    ParsedName avec parsed=False.
    """

    @abstractmethod
    def classify(
        self, name: str, parent_folder_name: Optional[str] = None
    ) -> ParsedName:
        """
        Parse un nom de fichier (ou de dossier) de release.

        Args:
            name: Nom a parser (sans le chemin)
            parent_folder_name: Nom du dossier parent. S'il se termine par un
                                marqueur de saison (ex: "Show.S02"), permet de
                                reconnaitre un fichier ne portant que "E05".

        Retourne:
            ParsedName avec les informations extraites
        """
        ...

    @abstractmethod
    def classify_folder(self, name: str) -> ParsedName:
        """
        Parse un nom de dossier.

        Un nom propre "Titre (Annee)" est reconnu directement, sinon le nom
        passe par classify().
        """
        ...

    @abstractmethod
    def extract_season_number(self, folder_name: str) -> Optional[int]:
        """
        Extrait le numero de saison d'un nom de sous-dossier.

        Retourne:
            Numero de saison, ou None si le dossier n'est pas un dossier de saison
        """
        ...

    @abstractmethod
    def classify_show_folder(self, name: str) -> ParsedName:
        """
        Parse un dossier de serie en ignorant un suffixe de saison.

        "Suits.S02" et "Suits Season 2" donnent tous deux le titre "Suits".
        """
        ...

    @abstractmethod
    def match_episode(
        self, name: str, parent_folder_name: Optional[str] = None
    ) -> Optional[EpisodeMarker]:
        """
        Cherche un marqueur saison/episode sans exiger de titre.

        Retourne:
            EpisodeMarker, ou None si le nom ne porte aucun marqueur
        """
        ...
