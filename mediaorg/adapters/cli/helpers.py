"""
Utilitaires partages pour les commandes CLI de MediaOrg.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- collect_video_files : resolution des arguments fichiers/repertoires
- format_season_episode : libelle SxxExx d'un Episode
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable

from loguru import logger as loguru_logger
from rich.console import Console

from mediaorg.core.entities.episode import Episode
from mediaorg.utils.files import iter_video_files

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("mediaorg")
    try:
        yield
    finally:
        loguru_logger.enable("mediaorg")


def collect_video_files(paths: Iterable[Path]) -> list[Path]:
    """
    Developpe les arguments de la ligne de commande en liste de fichiers.

    Un repertoire est parcouru recursivement (fichiers video uniquement),
    un fichier est conserve tel quel, quel que soit son type.
    Les doublons sont elimines en conservant l'ordre.
    """
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(iter_video_files(path))
        else:
            files.append(path)
    return list(dict.fromkeys(files))


def format_season_episode(episode: Episode) -> str:
    """Retourne "S02E05", ou "-" sans marqueur de saison/episode."""
    if not episode.has_episode_markers:
        return "-"
    return f"S{episode.season:02d}E{episode.episode:02d}"
