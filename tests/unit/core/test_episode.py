"""
Tests unitaires pour l'entite Episode et les objets valeur du domaine.
"""

import dataclasses
from pathlib import Path

import pytest

from mediaorg.core.entities import UNKNOWN, Episode
from mediaorg.core.errors import EpisodeError, MissingExtensionError, NameNotFoundError, ProbeError
from mediaorg.core.value_objects import MediaFormat, MediaResult, MediaType


class TestEpisode:
    """Tests pour l'entite Episode."""

    def test_textual_defaults_are_sentinels(self) -> None:
        """Test valeurs par defaut des champs textuels."""
        episode = Episode(
            full_path=Path("x.mkv"), filename="x.mkv", filename_clean="x",
            season=0, episode=0, is_movie=True,
        )

        assert episode.name == UNKNOWN
        assert episode.extension == UNKNOWN

    def test_no_markers_requires_movie(self) -> None:
        """Test qu.un Episode sans saison ni episode doit etre un film."""
        with pytest.raises(ValueError):
            Episode(Path("x.mkv"), "x.mkv", "x", season=0, episode=0, is_movie=False)

    def test_negative_numbers_are_rejected(self) -> None:
        """Test refus d.une saison negative."""
        with pytest.raises(ValueError):
            Episode(Path("x.mkv"), "x.mkv", "x", season=-1, episode=2, is_movie=False)

    def test_media_type_follows_classification(self) -> None:
        """Test correspondance is_movie -> MediaType."""
        movie = Episode(Path("a.mkv"), "a.mkv", "a", season=0, episode=0, is_movie=True)
        series = Episode(Path("b.mkv"), "b.mkv", "b", season=1, episode=2, is_movie=False)

        assert movie.media_type == MediaType.MOVIE
        assert series.media_type == MediaType.SERIES

    def test_has_episode_markers(self) -> None:
        """Test detection des marqueurs de saison/episode."""
        with_marker = Episode(Path("a"), "a", "a", season=0, episode=3, is_movie=False)
        without_marker = Episode(Path("a"), "a", "a", season=0, episode=0, is_movie=True)

        assert with_marker.has_episode_markers is True
        assert without_marker.has_episode_markers is False

    def test_is_frozen(self) -> None:
        """Test immutabilite de l'entite."""
        episode = Episode(Path("a.mkv"), "a.mkv", "a", season=1, episode=1, is_movie=False)

        with pytest.raises(dataclasses.FrozenInstanceError):
            episode.name = "other"  # type: ignore[misc]


class TestMediaFormat:
    """Tests pour la lecture de la duree."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            ("2712.480", 2712.48),
            ("3000", 3000.0),
            ("N/A", 0.0),
            ("", 0.0),
            (None, 0.0),
        ],
    )
    def test_duration_seconds(self, duration: str | None, expected: float) -> None:
        """Test conversion de la duree (illisible ou absente = 0.0)."""
        assert MediaFormat(duration=duration).duration_seconds == expected


class TestMediaResult:
    """Tests pour MediaResult et MediaType."""

    def test_display_name(self) -> None:
        """Test libelle "<titre> (<annee>)"."""
        result = MediaResult(
            title="Dark", year="2017", media_type=MediaType.SERIES,
            is_duplicate=False, accuracy=92,
        )

        assert result.display_name() == "Dark (2017)"
        assert str(result) == "Dark (2017)"

    def test_no_validation(self) -> None:
        """Test qu'aucune validation n'est appliquee aux champs."""
        result = MediaResult(title="", year="", media_type=MediaType.MOVIE, accuracy=-5)

        assert result.display_name() == " ()"
        assert result.is_duplicate is False

    def test_media_type_is_closed(self) -> None:
        """Test que MediaType ne contient que series et movie."""
        assert {member.value for member in MediaType} == {"series", "movie"}
        assert MediaType("movie") is MediaType.MOVIE


class TestErrors:
    """Tests pour la hierarchie d'exceptions."""

    @pytest.mark.parametrize("error_cls", [NameNotFoundError, MissingExtensionError, ProbeError])
    def test_errors_share_base_class(self, error_cls: type[EpisodeError]) -> None:
        """Test que toutes les erreurs derivent de EpisodeError et portent le chemin."""
        error = error_cls("boom", path=Path("a.mkv"))

        assert isinstance(error, EpisodeError)
        assert error.path == Path("a.mkv")
        assert str(error) == "boom"
