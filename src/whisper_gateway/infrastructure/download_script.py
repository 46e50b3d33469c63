"""Shell-script implementation of the ModelDownloader interface."""

import subprocess
from pathlib import Path

from whisper_gateway.exceptions import ModelInstallError
from whisper_gateway.interfaces import ModelDownloader
from whisper_gateway.logging import setup_logging

logger = setup_logging()


class ScriptModelDownloader(ModelDownloader):
    """Fetches models with whisper.cpp's download-ggml-model.sh."""

    def __init__(self, script_path: Path):
        self._script_path = script_path

    def download(self, model: str) -> None:
        try:
            subprocess.run(
                ["bash", str(self._script_path), model],
                capture_output=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            logger.exception(
                "Model download failed",
                extra={"model": model, "script": str(self._script_path)},
            )
            raise ModelInstallError(model, e) from e

        logger.info("Model downloaded", extra={"model": model})
