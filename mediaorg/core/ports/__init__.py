"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

- IDurationProbe : Analyse de la duree d'un fichier video
"""

from mediaorg.core.ports.duration_probe import IDurationProbe

__all__ = [
    "IDurationProbe",
]
