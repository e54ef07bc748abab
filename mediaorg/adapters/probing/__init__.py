"""
Adaptateurs de sonde de duree.

- MediaInfoDurationProbe: Lit la duree du conteneur avec pymediainfo
"""

from mediaorg.adapters.probing.mediainfo_probe import MediaInfoDurationProbe

__all__ = ["MediaInfoDurationProbe"]
