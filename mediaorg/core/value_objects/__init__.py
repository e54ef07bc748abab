"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaFormat : Description de format retournee par la sonde de duree
- MediaType : Type de media (SERIES, MOVIE)
- MediaResult : Resultat de recherche consomme en aval
"""

from mediaorg.core.value_objects.media_format import MediaFormat
from mediaorg.core.value_objects.media_result import MediaResult, MediaType

__all__ = [
    "MediaFormat",
    "MediaResult",
    "MediaType",
]
