"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour le listage reel des repertoires
de la bibliotheque.
"""

import os
from pathlib import Path

from mediatheque.core.entities.video import RawEntry
from mediatheque.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.
    """

    def list_entries(self, directory: Path) -> list[RawEntry]:
        """
        Liste les enfants directs d'un repertoire, tries par nom.

        Les liens symboliques sont suivis. Une entree dont le stat echoue
        (lien casse) est listee comme fichier de taille 0.

        Raises:
            OSError: repertoire absent ou illisible
        """
        entries: list[RawEntry] = []
        with os.scandir(directory) as iterator:
            for dir_entry in iterator:
                path = Path(dir_entry.path)
                try:
                    is_directory = dir_entry.is_dir()
                except OSError:
                    is_directory = False

                if is_directory:
                    entries.append(RawEntry(name=dir_entry.name, path=path, is_directory=True))
                    continue

                try:
                    size = dir_entry.stat().st_size
                except OSError:
                    size = 0
                entries.append(
                    RawEntry(
                        name=dir_entry.name,
                        path=path,
                        is_directory=False,
                        size=size,
                        extension=path.suffix.lower(),
                    )
                )

        entries.sort(key=lambda entry: entry.name)
        return entries

    def get_size(self, path: Path) -> int:
        """
        Recupere la taille du fichier en octets.

        Retourne 0 si le fichier n'existe pas.
        """
        try:
            return path.stat().st_size
        except OSError:
            return 0
