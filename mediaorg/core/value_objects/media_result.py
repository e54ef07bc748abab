"""
Objets valeur pour les resultats de recherche consommes en aval.

MediaResult est construit par un collaborateur de recherche externe
(TMDB, TVDB...) a partir des informations d'un Episode.
"""

from dataclasses import dataclass
from enum import Enum


class MediaType(Enum):
    """Type de media.

    Valeurs:
        SERIES: Serie TV (avec saison/episode)
        MOVIE: Film (long-metrage)
    """

    SERIES = "series"
    MOVIE = "movie"


@dataclass(frozen=True)
class MediaResult:
    """
    Resultat de recherche pour un media.

    Aucune validation n'est effectuee sur les champs.

    Attributs :
        title : Titre du media
        year : Annee de sortie/diffusion, telle que fournie par la source
        media_type : Type de media (SERIES ou MOVIE)
        is_duplicate : True si le media existe deja dans la videotheque
        accuracy : Score de correspondance avec la requete
    """

    title: str
    year: str
    media_type: MediaType
    is_duplicate: bool = False
    accuracy: int = 0

    def display_name(self) -> str:
        """Retourne le libelle "<titre> (<annee>)"."""
        return f"{self.title} ({self.year})"

    def __str__(self) -> str:
        return self.display_name()
