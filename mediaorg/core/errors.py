"""
Exceptions du domaine levees pendant la construction d'un Episode.

Toutes ces erreurs sont fatales pour la construction de l'Episode concerne :
il n'existe jamais d'Episode partiellement valide.
"""

from pathlib import Path
from typing import Optional


class EpisodeError(Exception):
    """
    Erreur de base pour la construction d'un Episode.

    Attributes:
        path: Chemin du fichier en cause (None si inconnu)
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


class NameNotFoundError(EpisodeError):
    """Aucun pattern n'a permis d'extraire un nom de serie ou de film."""


class MissingExtensionError(EpisodeError):
    """Le chemin ne possede pas d'extension."""


class ProbeError(EpisodeError):
    """
    La sonde de duree n'a pas pu analyser le fichier.

    Causes typiques : fichier absent, bibliotheque MediaInfo introuvable,
    contenu illisible ou format non supporte. L'exception d'origine est
    conservee dans __cause__.
    """
