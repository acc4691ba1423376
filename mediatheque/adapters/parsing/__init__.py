"""
Adaptateurs de parsing pour la mediatheque.

Ce package contient les implementations concretes des interfaces de parsing:
- NameClassifier: Classifie les noms de fichiers et dossiers de releases
- MediaInfoProbe: Lit resolution et duree avec pymediainfo
"""
