"""Handler for turning audio into text."""

from typing import BinaryIO

from whisper_gateway.domain import TranscriptionMode
from whisper_gateway.interfaces import ScratchStorage, TranscriptionRunner
from whisper_gateway.logging import setup_logging

logger = setup_logging()


class AudioRequestHandler:
    """Orchestrates staging audio on disk and running the transcriber on it."""

    def __init__(self, scratch: ScratchStorage, runner: TranscriptionRunner):
        self._scratch = scratch
        self._runner = runner

    def process(
        self, data: BinaryIO, original_name: str, mode: TranscriptionMode
    ) -> str:
        """
        Transcribes or translates one piece of audio.

        Args:
            data: File-like object containing the audio.
            original_name: Client-supplied file name.
            mode: Transcribe or translate.

        Returns:
            The raw text produced by the transcriber.

        Raises:
            ScratchFileError: If the audio cannot be staged.
            TranscriptionError: If the transcriber fails.
        """
        logger.info(
            "Processing audio",
            extra={"original_name": original_name, "mode": mode.value},
        )

        with self._scratch.hold(data, original_name) as audio_path:
            text = self._runner.run(audio_path, mode)

        logger.info(
            "Audio processed",
            extra={"original_name": original_name, "mode": mode.value},
        )
        return text
