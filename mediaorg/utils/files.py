"""
Recherche des fichiers video dans un repertoire.
"""

from pathlib import Path
from typing import Iterator

# Extensions video reconnues
VIDEO_EXTENSIONS: frozenset[str] = frozenset({
    ".mkv", ".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm", ".m4v"
})

# Patterns a ignorer dans les noms de fichiers (insensible a la casse)
IGNORED_PATTERNS: frozenset[str] = frozenset({
    "sample", "trailer", "preview", "extras", "bonus"
})


def iter_video_files(directory: Path) -> Iterator[Path]:
    """
    Parcourt recursivement un repertoire et yield les fichiers video.

    Ignore les repertoires, les symlinks, les extensions non video
    et les fichiers dont le nom contient un pattern ignore.
    Les chemins sont produits dans l'ordre alphabetique.
    """
    for path in sorted(directory.rglob("*")):
        if path.is_dir() or path.is_symlink():
            continue
        if path.suffix.lower() not in VIDEO_EXTENSIONS:
            continue
        filename_lower = path.name.lower()
        if any(pattern in filename_lower for pattern in IGNORED_PATTERNS):
            continue
        yield path
