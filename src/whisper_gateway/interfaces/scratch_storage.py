"""Abstract interface for staging audio on disk."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from pathlib import Path
from typing import BinaryIO


class ScratchStorage(ABC):
    """Abstract base class for short-lived audio files."""

    @abstractmethod
    def hold(
        self, data: BinaryIO, original_name: str
    ) -> AbstractContextManager[Path]:
        """
        Writes audio to a fresh scratch file for the duration of a block.

        Args:
            data: File-like object containing the audio.
            original_name: Client-supplied file name, only used for its suffix.

        Returns:
            A context manager yielding the scratch file path; the file is
            deleted when the block exits.

        Raises:
            ScratchFileError: If the file cannot be written.
        """
