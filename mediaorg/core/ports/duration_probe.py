"""
Interface port pour la sonde de duree des fichiers video.

La sonde est le seul appel bloquant de la construction d'un Episode.
Elle est isolee derriere cette interface pour pouvoir etre remplacee
par un mock dans les tests, ou deportee dans un thread par l'appelant.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from mediaorg.core.value_objects.media_format import MediaFormat


class IDurationProbe(ABC):
    """
    Interface pour l'analyse du conteneur d'un fichier video.

    Seul le champ duration de MediaFormat est utilise par le domaine.
    """

    @abstractmethod
    def probe(self, file_path: Path) -> MediaFormat:
        """
        Analyse un fichier video et retourne la description de son format.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            MediaFormat avec la duree en secondes (chaine), ou sans duree
            si le conteneur ne la declare pas.

        Raises:
            ProbeError: Si le fichier ne peut pas etre analyse
        """
        ...
