"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, stockage).

Sous-packages :
- entities/ : Entités du catalogue (Movie, TVShow, Season, Episode, VideoFile)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (ParsedName, identités, progression)
"""
