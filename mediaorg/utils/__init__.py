"""
Utilitaires et constantes pour MediaOrg.
"""

from mediaorg.utils.files import IGNORED_PATTERNS, VIDEO_EXTENSIONS, iter_video_files

__all__ = [
    "IGNORED_PATTERNS",
    "VIDEO_EXTENSIONS",
    "iter_video_files",
]
