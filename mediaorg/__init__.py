"""
MediaOrg - Classification des fichiers video (episodes de series ou films).

Ce package extrait depuis un nom de fichier le nom de la serie ou du film,
le numero de saison et le numero d'episode, puis decide s'il s'agit d'un film.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (nettoyage, extraction, classification)
- adapters/ : Couche infrastructure (CLI, sonde de duree pymediainfo)
"""

__version__ = "0.3.0"
