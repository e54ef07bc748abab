"""
Implementation de la sonde de duree avec pymediainfo.

Ce module fournit MediaInfoDurationProbe qui implemente IDurationProbe
en lisant la piste generale du conteneur.
"""

from pathlib import Path
from typing import Optional

from pymediainfo import MediaInfo as PyMediaInfo

from mediaorg.core.errors import ProbeError
from mediaorg.core.ports.duration_probe import IDurationProbe
from mediaorg.core.value_objects.media_format import MediaFormat


class MediaInfoDurationProbe(IDurationProbe):
    """
    Sonde de duree utilisant pymediainfo.

    Contrairement a un extracteur tolerant, toute impossibilite d'analyser
    le fichier est remontee sous forme de ProbeError.
    """

    def probe(self, file_path: Path) -> MediaFormat:
        """
        Lit la duree du conteneur.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            MediaFormat avec la duree en secondes (chaine)

        Raises:
            ProbeError: Fichier absent, bibliotheque MediaInfo introuvable,
                        fichier illisible ou sans piste generale
        """
        if not file_path.is_file():
            raise ProbeError(f"File not found: {file_path}", path=file_path)

        try:
            media_info = PyMediaInfo.parse(str(file_path))
        except (OSError, RuntimeError, ValueError) as exc:
            raise ProbeError(f"Error while probing {file_path}: {exc}", path=file_path) from exc

        general_tracks = [
            track for track in media_info.tracks if track.track_type == "General"
        ]
        if not general_tracks:
            raise ProbeError(f"No container information for {file_path}", path=file_path)

        return MediaFormat(duration=self._extract_duration(general_tracks[0].duration))

    def _extract_duration(self, duration_ms: object) -> Optional[str]:
        """
        Convertit la duree de la piste generale en secondes.

        CRITICAL: pymediainfo retourne la duree en millisecondes!
        Une valeur non numerique est transmise telle quelle (lue 0.0 ensuite).

        Args:
            duration_ms: Duree brute de la piste generale

        Returns:
            Duree en secondes sous forme de chaine, ou None
        """
        if duration_ms is None:
            return None
        try:
            return f"{float(duration_ms) / 1000:.3f}"
        except (TypeError, ValueError):
            return str(duration_ms)
