"""
Constructeurs d'entrees de repertoire pour simuler une arborescence.
"""

from pathlib import Path

from mediatheque.core.entities.video import RawEntry


def make_file(directory: Path, name: str, size: int = 1000) -> RawEntry:
    """Construit une entree fichier comme la produirait FileSystemAdapter."""
    path = directory / name
    return RawEntry(
        name=name,
        path=path,
        is_directory=False,
        size=size,
        extension=path.suffix.lower(),
    )


def make_dir(directory: Path, name: str) -> RawEntry:
    """Construit une entree dossier."""
    return RawEntry(name=name, path=directory / name, is_directory=True)


def tree_lister(tree: dict[Path, list[RawEntry]]):
    """
    Side effect pour IFileSystem.list_entries a partir d'un dictionnaire.

    Un repertoire absent du dictionnaire leve FileNotFoundError.
    """
    def list_entries(directory: Path) -> list[RawEntry]:
        if directory not in tree:
            raise FileNotFoundError(directory)
        return sorted(tree[directory], key=lambda entry: entry.name)
    return list_entries
