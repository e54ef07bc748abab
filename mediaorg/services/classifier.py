"""
Classification film / episode de serie.

Trois signaux essayes dans l'ordre, le premier decisif l'emporte :
1. Mot-cle "Film" ou "Movie" dans le nom brut
2. Absence de saison ET d'episode
3. Duree du conteneur superieure au seuil (sonde externe)
"""

from pathlib import Path

from loguru import logger

from mediaorg.core.ports.duration_probe import IDurationProbe

# Mots-cles designant un film dans le nom brut (sensible a la casse)
MOVIE_KEYWORDS = ("Film", "Movie")

# Au-dela de 50 minutes, un fichier est considere comme un film
DEFAULT_MOVIE_MIN_DURATION = 3000.0


class MovieClassifier:
    """
    Decide si un fichier video est un film ou un episode.

    La sonde de duree n'est appelee qu'en dernier recours, quand le nom
    contient des marqueurs de saison/episode mais aucun mot-cle de film.
    """

    def __init__(
        self,
        duration_probe: IDurationProbe,
        min_movie_duration: float = DEFAULT_MOVIE_MIN_DURATION,
    ) -> None:
        """
        Initialise le classificateur.

        Args:
            duration_probe: Implementation de IDurationProbe
            min_movie_duration: Seuil en secondes (strictement superieur = film)
        """
        self._duration_probe = duration_probe
        self._min_movie_duration = min_movie_duration

    def classify(self, filename: str, season: int, episode: int, file_path: Path) -> bool:
        """
        Classe le fichier.

        Args:
            filename: Nom de fichier brut (non nettoye)
            season: Saison extraite (0 si absente)
            episode: Episode extrait (0 si absent)
            file_path: Chemin complet, transmis a la sonde

        Returns:
            True si le fichier est un film

        Raises:
            ProbeError: Si la sonde ne peut pas analyser le fichier
        """
        if any(keyword in filename for keyword in MOVIE_KEYWORDS):
            logger.debug("Film detecte par mot-cle", filename=filename)
            return True

        if season == 0 and episode == 0:
            logger.debug("Film detecte par absence de saison/episode", filename=filename)
            return True

        media_format = self._duration_probe.probe(file_path)
        duration = media_format.duration_seconds
        is_movie = duration > self._min_movie_duration
        logger.debug(
            "Classification par duree",
            filename=filename,
            duration=duration,
            is_movie=is_movie,
        )
        return is_movie
