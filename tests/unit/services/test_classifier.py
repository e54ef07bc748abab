"""
Tests unitaires pour MovieClassifier.

Verifie l'ordre des signaux (mot-cle, absence de marqueurs, duree)
et que la sonde n'est appelee qu'en dernier recours.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mediaorg.core.errors import ProbeError
from mediaorg.core.value_objects import MediaFormat
from mediaorg.services.classifier import MovieClassifier


@pytest.fixture
def classifier(mock_duration_probe: MagicMock) -> MovieClassifier:
    """Classificateur avec le seuil par defaut et la sonde mockee."""
    return MovieClassifier(mock_duration_probe)


class TestMovieClassifierShortCircuit:
    """Tests des signaux qui evitent l'appel a la sonde."""

    def test_film_keyword(
        self, classifier: MovieClassifier, mock_duration_probe: MagicMock
    ) -> None:
        """Test film detecte par le mot-cle Film."""
        result = classifier.classify("Big.Movie.Film.2020.mkv", 0, 0, Path("Big.Movie.Film.2020.mkv"))

        assert result is True
        mock_duration_probe.probe.assert_not_called()

    def test_movie_keyword_wins_over_markers(
        self, classifier: MovieClassifier, mock_duration_probe: MagicMock
    ) -> None:
        """Test que le mot-cle Movie l'emporte sur des marqueurs SxxExx."""
        result = classifier.classify("Show.Movie.S01E02.mkv", 1, 2, Path("Show.Movie.S01E02.mkv"))

        assert result is True
        mock_duration_probe.probe.assert_not_called()

    def test_no_markers_is_movie(
        self, classifier: MovieClassifier, mock_duration_probe: MagicMock
    ) -> None:
        """Test qu'aucune saison ni episode classe en film."""
        result = classifier.classify("RandomFile.mkv", 0, 0, Path("RandomFile.mkv"))

        assert result is True
        mock_duration_probe.probe.assert_not_called()

    def test_keyword_is_case_sensitive(
        self, classifier: MovieClassifier, mock_duration_probe: MagicMock
    ) -> None:
        """Test que "film" en minuscules ne court-circuite pas la sonde."""
        path = Path("my.film.S01E01.mkv")

        result = classifier.classify(path.name, 1, 1, path)

        assert result is False
        mock_duration_probe.probe.assert_called_once_with(path)


class TestMovieClassifierDuration:
    """Tests de la classification par duree."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            ("5400.0", True),
            ("3000.001", True),
            ("3000.0", False),
            ("2700.000", False),
            ("N/A", False),
            (None, False),
        ],
    )
    def test_duration_threshold(
        self,
        classifier: MovieClassifier,
        mock_duration_probe: MagicMock,
        duration: str | None,
        expected: bool,
    ) -> None:
        """Test seuil strict de 3000 secondes (duree illisible = 0.0)."""
        mock_duration_probe.probe.return_value = MediaFormat(duration=duration)
        path = Path("/videos/Show.S01E01.mkv")

        result = classifier.classify(path.name, 1, 1, path)

        assert result is expected
        mock_duration_probe.probe.assert_called_once_with(path)

    def test_episode_only_marker_uses_probe(
        self, classifier: MovieClassifier, mock_duration_probe: MagicMock
    ) -> None:
        """Test qu'un seul marqueur (episode) suffit a consulter la sonde."""
        result = classifier.classify("Naruto.042.mkv", 0, 42, Path("Naruto.042.mkv"))

        assert result is False
        mock_duration_probe.probe.assert_called_once()

    def test_custom_threshold(self, mock_duration_probe: MagicMock) -> None:
        """Test seuil configurable."""
        mock_duration_probe.probe.return_value = MediaFormat(duration="1800")
        classifier = MovieClassifier(mock_duration_probe, min_movie_duration=1200.0)

        assert classifier.classify("Show.S01E01.mkv", 1, 1, Path("Show.S01E01.mkv")) is True

    def test_probe_error_propagates(
        self, classifier: MovieClassifier, mock_duration_probe: MagicMock
    ) -> None:
        """Test qu'une erreur de la sonde est remontee sans etre recuperee."""
        mock_duration_probe.probe.side_effect = ProbeError("cannot probe")

        with pytest.raises(ProbeError, match="cannot probe"):
            classifier.classify("Show.S01E01.mkv", 1, 1, Path("Show.S01E01.mkv"))
