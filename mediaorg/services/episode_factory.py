"""
Service de construction des Episodes.

Enchaine, dans un ordre fixe : nettoyage du nom, extraction du nom, de la
saison, de l'episode et de l'extension, puis classification film/serie.
Toute erreur interrompt la construction : il n'y a pas d'Episode partiel.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from mediaorg.config import Settings
from mediaorg.core.entities.episode import UNKNOWN, Episode
from mediaorg.core.errors import EpisodeError, MissingExtensionError, NameNotFoundError
from mediaorg.core.ports.duration_probe import IDurationProbe
from mediaorg.services.classifier import MovieClassifier
from mediaorg.services.cleaner import clean_filename
from mediaorg.services.extractor import (
    extract_episode,
    extract_extension,
    extract_name,
    extract_season,
)


@dataclass(frozen=True)
class EpisodeOutcome:
    """
    Resultat de la construction d'un Episode dans un lot.

    Exactement un des deux champs episode/error est renseigne.

    Attributs:
        path: Chemin du fichier traite
        episode: Episode construit, ou None en cas d'echec
        error: Erreur ayant interrompu la construction, ou None
    """

    path: Path
    episode: Optional[Episode] = None
    error: Optional[EpisodeError] = None

    @property
    def success(self) -> bool:
        return self.error is None


class EpisodeFactory:
    """
    Construit des Episodes a partir de chemins de fichiers.

    Ne conserve aucun etat mutable entre deux constructions : une meme
    instance peut etre utilisee depuis plusieurs threads.
    """

    def __init__(self, duration_probe: IDurationProbe, settings: Settings) -> None:
        """
        Initialise la factory.

        Args:
            duration_probe: Implementation de IDurationProbe pour la classification
            settings: Configuration de l'application
        """
        self._classifier = MovieClassifier(
            duration_probe,
            min_movie_duration=settings.movie_min_duration_seconds,
        )
        self._extra_noise_tokens = tuple(settings.extra_noise_tokens)
        self._allow_missing_extension = settings.allow_missing_extension
        self._max_workers = settings.max_workers

    def create(self, file_path: Path) -> Episode:
        """
        Construit l'Episode d'un fichier video.

        Args:
            file_path: Chemin du fichier video

        Returns:
            Episode entierement renseigne

        Raises:
            NameNotFoundError: Si aucun nom ne peut etre extrait
            MissingExtensionError: Si le fichier n'a pas d'extension
                (sauf si allow_missing_extension est active)
            ProbeError: Si la sonde de duree echoue
        """
        file_path = Path(file_path)
        filename = file_path.name
        filename_clean = clean_filename(filename, self._extra_noise_tokens)

        try:
            name = extract_name(filename_clean)
        except NameNotFoundError as exc:
            exc.path = file_path
            raise
        season = extract_season(filename_clean)
        episode = extract_episode(filename_clean)
        extension = self._resolve_extension(file_path)
        is_movie = self._classifier.classify(filename, season, episode, file_path)

        logger.debug(
            "Episode analyse",
            filename=filename,
            name=name,
            season=season,
            episode=episode,
            is_movie=is_movie,
        )
        return Episode(
            full_path=file_path,
            filename=filename,
            filename_clean=filename_clean,
            extension=extension,
            name=name,
            season=season,
            episode=episode,
            is_movie=is_movie,
        )

    def _resolve_extension(self, file_path: Path) -> str:
        try:
            return extract_extension(file_path)
        except MissingExtensionError:
            if self._allow_missing_extension:
                logger.warning("Fichier sans extension", path=str(file_path))
                return UNKNOWN
            raise

    async def create_async(self, file_path: Path) -> Episode:
        """Construit un Episode dans un thread (la sonde de duree est bloquante)."""
        return await asyncio.to_thread(self.create, file_path)

    async def create_many(self, paths: Iterable[Path]) -> list[EpisodeOutcome]:
        """
        Construit un lot d'Episodes en parallele.

        Le nombre de constructions simultanees est borne par max_workers.
        Une erreur sur un fichier n'interrompt pas le lot : une exception
        hors EpisodeError est enveloppee dans un EpisodeError.

        Args:
            paths: Chemins des fichiers video

        Returns:
            Un EpisodeOutcome par chemin, dans l'ordre d'entree
        """
        semaphore = asyncio.Semaphore(self._max_workers)

        async def build(path: Path) -> EpisodeOutcome:
            async with semaphore:
                try:
                    episode = await self.create_async(path)
                except EpisodeError as exc:
                    logger.warning("Analyse impossible", path=str(path), error=str(exc))
                    return EpisodeOutcome(path=Path(path), error=exc)
                except Exception as exc:
                    # Erreur hors contrat (ex: sonde injectee defaillante)
                    logger.exception("Erreur inattendue pendant l'analyse", path=str(path))
                    error = EpisodeError(f"Unexpected error: {exc}", path=Path(path))
                    error.__cause__ = exc
                    return EpisodeOutcome(path=Path(path), error=error)
                return EpisodeOutcome(path=Path(path), episode=episode)

        return list(await asyncio.gather(*(build(path) for path in paths)))
