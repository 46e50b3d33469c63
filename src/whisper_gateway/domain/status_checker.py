"""Reports whether the whisper binary is installed."""

from pathlib import Path


class StatusChecker:
    """Checks the filesystem for the transcription binary."""

    def __init__(self, binary_path: Path):
        self._binary_path = binary_path

    def is_installed(self) -> bool:
        return self._binary_path.exists()
