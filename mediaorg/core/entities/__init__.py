"""
Entites du domaine.

- Episode : Fichier video analyse (serie ou film)
"""

from mediaorg.core.entities.episode import UNKNOWN, Episode

__all__ = [
    "Episode",
    "UNKNOWN",
]
