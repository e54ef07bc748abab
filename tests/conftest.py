"""
Fixtures pytest partagees pour les tests MediaOrg.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de la sonde de duree (IDurationProbe)
- Settings de test avec chemins temporaires
- Factory d'Episodes branchee sur le mock
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mediaorg.config import Settings
from mediaorg.core.ports.duration_probe import IDurationProbe
from mediaorg.core.value_objects import MediaFormat
from mediaorg.services.episode_factory import EpisodeFactory


@pytest.fixture
def mock_duration_probe() -> MagicMock:
    """
    Mock de IDurationProbe pour les tests.

    Retourne une duree d'episode (45 minutes) par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IDurationProbe)
    mock.probe.return_value = MediaFormat(duration="2700.000")
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec fichier de log temporaire."""
    return Settings(
        movie_min_duration_seconds=3000.0,
        allow_missing_extension=False,
        extra_noise_tokens=(),
        max_workers=2,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def episode_factory(
    mock_duration_probe: MagicMock, test_settings: Settings
) -> EpisodeFactory:
    """EpisodeFactory utilisant la sonde mockee."""
    return EpisodeFactory(duration_probe=mock_duration_probe, settings=test_settings)
