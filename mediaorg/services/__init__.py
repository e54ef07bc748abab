"""
Couche application : nettoyage, extraction, classification et construction des Episodes.
"""

from mediaorg.services.classifier import MovieClassifier
from mediaorg.services.cleaner import NOISE_TOKENS, clean_filename
from mediaorg.services.episode_factory import EpisodeFactory, EpisodeOutcome
from mediaorg.services.extractor import (
    extract_episode,
    extract_extension,
    extract_name,
    extract_season,
)

__all__ = [
    "EpisodeFactory",
    "EpisodeOutcome",
    "MovieClassifier",
    "NOISE_TOKENS",
    "clean_filename",
    "extract_episode",
    "extract_extension",
    "extract_name",
    "extract_season",
]
