"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.probing.mediainfo_probe import MediaInfoDurationProbe
from .config import Settings
from .services.episode_factory import EpisodeFactory


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        factory = container.episode_factory()
        episode = factory.create(path)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    duration_probe = providers.Singleton(MediaInfoDurationProbe)

    # Services
    episode_factory = providers.Factory(
        EpisodeFactory,
        duration_probe=duration_probe,
        settings=config,
    )
