"""
Constantes globales pour Mediatheque.

Ce module contient les constantes partagees entre le scanner, le classifieur
de noms et le suivi de lecture:
- Extensions video reconnues
- Seuils de progression (en cours / termine)
- Noms des fichiers persistants
"""

# Extensions video reconnues (comparaison en minuscules)
VIDEO_EXTENSIONS = frozenset({
    ".mp4",
    ".mov",
    ".avi",
    ".mkv",
    ".webm",
    ".m4v",
})

# Progression minimale pour apparaitre dans "Reprendre la lecture"
IN_PROGRESS_MIN_PERCENTAGE = 1.0

# A partir de ce pourcentage un element est considere comme termine
COMPLETED_PERCENTAGE = 95.0

# Nombre d'entrees retournees par defaut pour "Reprendre la lecture"
CONTINUE_WATCHING_LIMIT = 3

# Valeur utilisee dans les cles quand l'annee est inconnue
NO_YEAR = "no-year"

# Fichiers JSON persistants (dans data_dir)
METADATA_CACHE_FILENAME = "metadata-cache.json"
REMOTE_CACHE_FILENAME = "tmdb-cache.json"
PROGRESS_FILENAME = "watch-progress.json"
