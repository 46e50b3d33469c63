"""whisper.cpp command-line implementation of the TranscriptionRunner interface."""

import subprocess
from pathlib import Path

from whisper_gateway.domain.models import TranscriptionMode
from whisper_gateway.exceptions import TranscriptionError
from whisper_gateway.interfaces import TranscriptionRunner
from whisper_gateway.logging import setup_logging

logger = setup_logging()

_STDERR_LOG_LIMIT = 500


class WhisperCliRunner(TranscriptionRunner):
    """Runs the whisper.cpp binary once per audio file and captures stdout."""

    def __init__(
        self,
        binary_path: Path,
        model: str,
        timeout_seconds: float | None = None,
    ):
        self._binary_path = binary_path
        self._model = model
        self._timeout_seconds = timeout_seconds

    def build_command(self, audio_path: Path, mode: TranscriptionMode) -> list[str]:
        command = [
            str(self._binary_path),
            "--file",
            str(audio_path),
            "--model",
            self._model,
        ]
        if mode is TranscriptionMode.TRANSLATE:
            command.append("--translate")
        return command

    def run(self, audio_path: Path, mode: TranscriptionMode) -> str:
        """
        Invokes the binary and returns its standard output.

        Non-zero exit, spawn failure and timeout all raise TranscriptionError.
        Standard error is logged here and never returned to callers.
        """
        command = self.build_command(audio_path, mode)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                check=True,
                timeout=self._timeout_seconds,
            )
        except subprocess.CalledProcessError as e:
            logger.error(
                "Whisper exited with an error",
                extra={
                    "file_name": audio_path.name,
                    "mode": mode.value,
                    "returncode": e.returncode,
                    "stderr": _tail(e.stderr),
                },
            )
            raise TranscriptionError(audio_path.name, e) from e
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.exception(
                "Whisper could not be run",
                extra={"file_name": audio_path.name, "mode": mode.value},
            )
            raise TranscriptionError(audio_path.name, e) from e

        logger.info(
            "Whisper run completed",
            extra={"file_name": audio_path.name, "mode": mode.value},
        )
        return completed.stdout.decode("utf-8", errors="replace")


def _tail(stderr: bytes | None) -> str:
    if not stderr:
        return ""
    return stderr[-_STDERR_LOG_LIMIT:].decode("utf-8", errors="replace")
