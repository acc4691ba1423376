"""
Médiathèque - Catalogue de vidéothèque personnelle.

Ce package transforme une arborescence de fichiers vidéo en un catalogue de
films et de séries, conserve des caches de métadonnées dérivées et détermine
l'épisode à lire ensuite à partir de l'historique de lecture.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (scan, regroupement, caches, progression)
- adapters/ : Couche infrastructure (CLI, système de fichiers, parsing, stockage JSON)
"""

__version__ = "0.1.0"
