"""Core logic for making sure a ggml model is available locally."""

import re
from pathlib import Path

from whisper_gateway.exceptions import InvalidModelNameError
from whisper_gateway.interfaces.model_downloader import ModelDownloader
from whisper_gateway.logging import setup_logging

from .models import ModelInstallResult

logger = setup_logging()

_MODEL_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9._-]*")


class ModelInstaller:
    """Ensures model files exist, downloading missing ones on demand."""

    def __init__(self, models_dir: Path, downloader: ModelDownloader):
        self._models_dir = models_dir
        self._downloader = downloader

    def model_path(self, model: str) -> Path:
        """Maps a model name to its ggml file (e.g. tiny -> ggml-tiny.bin)."""
        if not _MODEL_NAME_PATTERN.fullmatch(model):
            raise InvalidModelNameError(model)
        return self._models_dir / f"ggml-{model}.bin"

    def ensure(self, model: str) -> ModelInstallResult:
        """
        Makes sure the model file is present.

        Args:
            model: Short model name.

        Returns:
            ModelInstallResult telling whether a download was needed.

        Raises:
            InvalidModelNameError: If the name is not a plain model name.
            ModelInstallError: If the download fails.
        """
        path = self.model_path(model)
        if path.exists():
            logger.info("Model already installed", extra={"model": model})
            return ModelInstallResult(model=model, already_installed=True)

        logger.info(
            "Model missing, starting download",
            extra={"model": model, "model_path": str(path)},
        )
        self._downloader.download(model)
        logger.info("Model installed", extra={"model": model})
        return ModelInstallResult(model=model, already_installed=False)
