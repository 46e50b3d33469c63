"""Abstract interface for running the transcription binary."""

from abc import ABC, abstractmethod
from pathlib import Path

from whisper_gateway.domain.models import TranscriptionMode


class TranscriptionRunner(ABC):
    """Abstract base class for speech-to-text backends working on files."""

    @abstractmethod
    def run(self, audio_path: Path, mode: TranscriptionMode) -> str:
        """
        Transcribes or translates the audio file at the given path.

        Args:
            audio_path: Path of the audio file to process.
            mode: Whether to transcribe or translate to English.

        Returns:
            The text produced by the backend, unmodified.

        Raises:
            TranscriptionError: If the backend fails for any reason.
        """
