"""
Configuration du logging de MediaOrg via loguru.

La sortie console est toujours active. La sortie fichier (JSON, avec
rotation) n'est ajoutee que si un fichier de log est configure
(MEDIAORG_LOG_FILE) : par defaut, aucune ecriture disque.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Le contexte passe en kwargs (filename, season...) est affiche via {extra}
CONSOLE_FORMAT = (
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> list[int]:
    """Remplace les handlers loguru par ceux de MediaOrg.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, ou None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver

    Returns :
        Identifiants des handlers ajoutes (console d'abord)
    """
    logger.remove()

    handler_ids = [
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)
    ]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_file,
                level="DEBUG",  # Details de classification (duree, signaux)
                format="{message}",
                serialize=True,
                rotation=rotation_size,
                retention=retention_count,
                compression="zip",
                enqueue=True,  # Constructions en parallele dans des threads
            )
        )

    logger.debug("Logging configure", log_file=str(log_file) if log_file else None)
    return handler_ids
