"""
Persistance fichier de la mediatheque.

- JsonFileStore: Dictionnaire cle -> valeur JSON persiste dans un fichier
"""

from mediatheque.adapters.persistence.json_store import JsonFileStore

__all__ = ["JsonFileStore"]
