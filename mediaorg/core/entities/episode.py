"""
Entite Episode.

Resultat de l'analyse d'un fichier video : nom nettoye, saison, episode,
extension et classification film/serie. L'entite est construite par
EpisodeFactory et n'est plus jamais modifiee ensuite.
"""

from dataclasses import dataclass
from pathlib import Path

from mediaorg.core.value_objects.media_result import MediaType

# Valeur sentinelle pour un champ textuel non determine
UNKNOWN = "unknown"


@dataclass(frozen=True)
class Episode:
    """
    Fichier video analyse.

    Attributes:
        full_path: Chemin du fichier video
        filename: Nom du fichier (dernier composant du chemin, extension incluse)
        filename_clean: Nom normalise, decoupable en tokens
        extension: Extension sans le point (ex: "mkv"), ou "unknown"
        name: Nom de la serie ou du film, ou "unknown"
        season: Numero de saison (0 = aucun marqueur de saison)
        episode: Numero d'episode (0 = aucun marqueur d'episode)
        is_movie: True si le fichier est classe comme film
    """

    full_path: Path
    filename: str
    filename_clean: str
    season: int
    episode: int
    is_movie: bool
    extension: str = UNKNOWN
    name: str = UNKNOWN

    def __post_init__(self) -> None:
        if self.season < 0 or self.episode < 0:
            raise ValueError("season and episode must be non-negative")
        if not self.has_episode_markers and not self.is_movie:
            raise ValueError("an Episode without season and episode must be a movie")

    @property
    def media_type(self) -> MediaType:
        """Type de media correspondant a la classification."""
        return MediaType.MOVIE if self.is_movie else MediaType.SERIES

    @property
    def has_episode_markers(self) -> bool:
        """True si une saison ou un episode a ete detecte."""
        return self.season != 0 or self.episode != 0
