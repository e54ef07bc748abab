"""
Nettoyage des noms de fichiers video avant extraction.

Produit une chaine decoupable en tokens : separateurs remplaces par des
espaces, contenu entre crochets/parentheses supprime, et suppression d'un
vocabulaire fixe de tags de release (qualite, codec, langue, sites...).
"""

import re
from typing import Iterable

# Separateurs remplaces par un espace
SEPARATORS = (".", "_", "-", "+")

# Contenu entre crochets puis entre parentheses (non gourmand, une ligne)
_BRACKETS = re.compile(r"\[.*?\]")
_PARENTHESES = re.compile(r"\(.*?\)")

_WHITESPACE = re.compile(r"\s+")

# Tags de release supprimes en sous-chaine, sensible a la casse.
# L'ordre compte : "WEB" est retire apres "WEBRip", "Raws" apres "TsundereRaws".
NOISE_TOKENS: tuple[str, ...] = (
    # Sites et extensions
    "www", "com", "org", "info", "mkv", "mp4", "avi", "wmv",
    "flv", "mov", "webm",
    # Qualite et codecs
    "720p", "1080p", "x264", "x265", "HEVC",
    # Langues et audio
    "MULTI", "AAC", "HD", "FRENCH", "VOSTFR", "VOSTA", "VF", "VO",
    # Sources
    "DL", "WEBRip", "WEB-DL", "WEB", "WEBRIP", "Rip", "RIP",
    "BluRay", "Blu-Ray", "Blu-ray",
    # Mots-cles de film
    "Film", "Movie",
    # Groupes et sites de release
    "TsundereRaws", "Tsundere", "Raws", "ws", "tv", "TV",
    "vostfree", "boats", "uno", "Wawacity", "wawacity", "H264",
    "NanDesuKa", "FANSUB",
)


def clean_filename(filename: str, extra_tokens: Iterable[str] = ()) -> str:
    """
    Normalise un nom de fichier pour le decoupage en tokens.

    Fonction pure et totale. Les crochets/parentheses sont retires avant
    les tags : un tag entre crochets disparait avec son groupe, un tag
    restant est retire meme au milieu d'un mot.

    Args:
        filename: Nom du fichier brut (extension incluse)
        extra_tokens: Tags supplementaires retires apres NOISE_TOKENS

    Returns:
        Nom nettoye, mots separes par un espace unique
    """
    cleaned = filename
    for separator in SEPARATORS:
        cleaned = cleaned.replace(separator, " ")

    cleaned = _BRACKETS.sub("", cleaned)
    cleaned = _PARENTHESES.sub("", cleaned)

    for token in (*NOISE_TOKENS, *extra_tokens):
        if token:
            cleaned = cleaned.replace(token, "")

    return _WHITESPACE.sub(" ", cleaned).strip()
