"""
Extraction du nom, de la saison, de l'episode et de l'extension.

Chaque extraction suit une chaine ordonnee de strategies : un parcours
rapide des tokens d'abord, puis des expressions regulieres en repli.
Chaque strategie retourne None quand elle ne trouve rien ; la premiere
valeur non None l'emporte.

Un marqueur reconnu mais dont le numero ne se convertit pas en entier
donne 1. L'absence de tout marqueur donne 0.
"""

import re
import unicodedata
from pathlib import Path
from typing import Callable, Optional, TypeVar

from mediaorg.core.errors import MissingExtensionError, NameNotFoundError

T = TypeVar("T")

# Valeur retournee quand un marqueur est trouve mais illisible
PARSE_FAILURE_DEFAULT = 1

# Valeur retournee quand aucun marqueur n'est trouve
NOT_FOUND = 0

# Plus grand numero accepte (entier non signe 32 bits), au-dela : echec de lecture
MAX_NUMBER = 0xFFFFFFFF

# Categories Unicode des caracteres numeriques acceptes dans un marqueur
NUMERIC_CATEGORIES = ("Nd", "Nl", "No")

# Patterns "tout ce qui precede", essayes dans l'ordre
NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(.+?)(S\d{1,2}E\d{1,2}|S\d{1,2})"),
    re.compile(r"(.+?)(S\d{1,2} \d{1,2})"),
    re.compile(r"(.+?)(E\d{1,2})"),
    re.compile(r"(.+?)(\d{1,3})"),
    re.compile(r"(.+?)(Film|Movie)"),
    re.compile(r"(.+)"),
)

SEASON_PATTERN = re.compile(r"S(\d{1,2})(?:E\d{1,2})?")

EPISODE_PATTERN = re.compile(r"(?:S\d{1,2}E(\d{1,2}))|(?:E(\d{1,2}))|(?:\b(\d{1,3})\b)")


def _first_match(strategies: tuple[Callable[[str], Optional[T]], ...], cleaned: str) -> Optional[T]:
    for strategy in strategies:
        result = strategy(cleaned)
        if result is not None:
            return result
    return None


def _is_marker(token: str, prefix: str) -> bool:
    """True si le token est le prefixe suivi uniquement de chiffres (ex: S02, E13)."""
    return (
        len(token) > 1
        and token.startswith(prefix)
        and all(unicodedata.category(char) in NUMERIC_CATEGORIES for char in token[1:])
    )


def _to_number(digits: str) -> int:
    """Convertit des chiffres ASCII en entier, PARSE_FAILURE_DEFAULT sinon (ou hors plage)."""
    if not (digits.isascii() and digits.isdigit()):
        return PARSE_FAILURE_DEFAULT
    number = int(digits)
    if number > MAX_NUMBER:
        return PARSE_FAILURE_DEFAULT
    return number


# ---------------------------------------------------------------------------
# Nom
# ---------------------------------------------------------------------------

def _name_from_tokens(cleaned: str) -> Optional[str]:
    tokens = cleaned.split()
    for index, token in enumerate(tokens):
        if _is_marker(token, "S") or _is_marker(token, "E"):
            return " ".join(tokens[:index]).strip()
    return None


def _name_from_patterns(cleaned: str) -> Optional[str]:
    for pattern in NAME_PATTERNS:
        match = pattern.search(cleaned)
        if match and match.group(1) is not None:
            return match.group(1).strip()
    return None


NAME_STRATEGIES = (_name_from_tokens, _name_from_patterns)


def extract_name(cleaned: str) -> str:
    """
    Extrait le nom de la serie ou du film depuis un nom nettoye.

    Le nom est tout ce qui precede le premier marqueur de saison ou
    d'episode. A defaut, les patterns de NAME_PATTERNS sont essayes
    dans l'ordre, le dernier capturant la chaine entiere.

    Args:
        cleaned: Nom de fichier nettoye

    Returns:
        Nom extrait (peut etre vide si le marqueur est le premier token)

    Raises:
        NameNotFoundError: Si aucun pattern ne correspond (chaine vide)
    """
    name = _first_match(NAME_STRATEGIES, cleaned)
    if name is None:
        raise NameNotFoundError(f"Name not found in {cleaned!r}")
    return name


# ---------------------------------------------------------------------------
# Saison
# ---------------------------------------------------------------------------

def _season_from_tokens(cleaned: str) -> Optional[int]:
    for token in cleaned.split():
        if _is_marker(token, "S"):
            return _to_number(token[1:])
    return None


def _season_from_pattern(cleaned: str) -> Optional[int]:
    match = SEASON_PATTERN.search(cleaned)
    if match:
        return _to_number(match.group(1))
    return None


SEASON_STRATEGIES = (_season_from_tokens, _season_from_pattern)


def extract_season(cleaned: str) -> int:
    """Extrait le numero de saison (0 si aucun marqueur)."""
    season = _first_match(SEASON_STRATEGIES, cleaned)
    return NOT_FOUND if season is None else season


# ---------------------------------------------------------------------------
# Episode
# ---------------------------------------------------------------------------

def _episode_from_tokens(cleaned: str) -> Optional[int]:
    for token in cleaned.split():
        if _is_marker(token, "E"):
            return _to_number(token[1:])
    return None


def _episode_from_pattern(cleaned: str) -> Optional[int]:
    match = EPISODE_PATTERN.search(cleaned)
    if match is None:
        return None
    for group in match.groups():
        if group:
            return _to_number(group)
    return None


EPISODE_STRATEGIES = (_episode_from_tokens, _episode_from_pattern)


def extract_episode(cleaned: str) -> int:
    """
    Extrait le numero d'episode (0 si aucun marqueur).

    En repli, un nombre isole de 1 a 3 chiffres est considere comme un
    numero d'episode (ex: "Naruto 042").
    """
    episode = _first_match(EPISODE_STRATEGIES, cleaned)
    return NOT_FOUND if episode is None else episode


# ---------------------------------------------------------------------------
# Extension
# ---------------------------------------------------------------------------

def extract_extension(file_path: Path) -> str:
    """
    Retourne l'extension du fichier sans le point, casse conservee.

    Raises:
        MissingExtensionError: Si le nom de fichier n'a pas d'extension
    """
    suffix = Path(file_path).suffix
    if not suffix or suffix == ".":
        raise MissingExtensionError(f"No extension for {file_path}", path=Path(file_path))
    return suffix[1:]
