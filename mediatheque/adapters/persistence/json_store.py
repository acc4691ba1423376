"""
Store cle/valeur persiste dans un fichier JSON.

Le fichier est charge paresseusement au premier acces puis reste en memoire.
Chaque ecriture reecrit le fichier complet (UTF-8, indente). Le store est
"fail-open" : un fichier corrompu ou illisible donne un store vide, une
ecriture impossible conserve l'etat en memoire. Les erreurs sont transmises
au hook on_error.
"""

import json
import threading
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

from loguru import logger

ErrorHook = Callable[[str, Exception], None]


def log_store_error(operation: str, error: Exception) -> None:
    """Hook par defaut : journalise l'erreur en WARNING."""
    logger.warning(f"Store JSON ({operation}): {error}")


class JsonFileStore:
    """
    Dictionnaire str -> valeur JSON persiste dans un fichier.

    Un RLock protege chaque couple chargement/ecriture : le scanner sonde
    les fichiers depuis plusieurs threads.

    Attributes:
        path: Fichier JSON du store
    """

    def __init__(self, path: Path, on_error: Optional[ErrorHook] = None) -> None:
        self.path = Path(path)
        self._on_error = on_error or log_store_error
        self._data: Optional[dict[str, Any]] = None
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        """Enregistre une valeur et reecrit le fichier."""
        with self._lock:
            self._load()[key] = value
            self._save()

    def delete(self, key: str) -> bool:
        """
        Supprime une cle.

        Returns:
            True si la cle existait
        """
        with self._lock:
            data = self._load()
            if key not in data:
                return False
            del data[key]
            self._save()
            return True

    def items(self) -> list[tuple[str, Any]]:
        """Copie des couples (cle, valeur), stable pendant l'iteration."""
        with self._lock:
            return list(self._load().items())

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._load().keys())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._load()

    def __len__(self) -> int:
        with self._lock:
            return len(self._load())

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def reload(self) -> None:
        """Oublie l'etat en memoire ; le prochain acces relit le fichier."""
        with self._lock:
            self._data = None

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        self._data = {}
        if not self.path.exists():
            return self._data

        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            self._on_error("load", exc)
            return self._data

        if not isinstance(document, dict):
            self._on_error(
                "load",
                ValueError(f"{self.path}: objet JSON attendu, {type(document).__name__} trouve"),
            )
            return self._data

        self._data = document
        logger.debug(f"Store charge: {self.path} ({len(document)} entrees)")
        return self._data

    def _save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(self._data, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as exc:
            self._on_error("save", exc)
