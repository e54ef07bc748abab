"""
Objet valeur pour la description de format retournee par la sonde de duree.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MediaFormat:
    """
    Description du conteneur media telle que rapportee par la sonde.

    Attributs :
        duration : Duree du conteneur en secondes, encodee en chaine
                   (ex: "2712.480"), ou None si la sonde ne la fournit pas
    """

    duration: Optional[str] = None

    @property
    def duration_seconds(self) -> float:
        """
        Retourne la duree en secondes.

        Une duree absente ou non numerique vaut 0.0.
        """
        if self.duration is None:
            return 0.0
        try:
            return float(self.duration)
        except ValueError:
            return 0.0
