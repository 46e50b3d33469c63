"""Application configuration loaded from environment variables."""

import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, computed_field


class WhisperConfig(BaseModel, frozen=True):
    """Location and invocation settings of the local whisper.cpp install."""

    whisper_dir: Path
    default_model: str = "medium"
    transcription_model: str = "medium"
    timeout_seconds: float | None = None

    @computed_field
    @property
    def binary_path(self) -> Path:
        """Returns the path of the whisper.cpp command-line binary."""
        return self.whisper_dir / "main"

    @computed_field
    @property
    def models_dir(self) -> Path:
        """Returns the directory holding ggml model files."""
        return self.whisper_dir / "models"

    @computed_field
    @property
    def download_script(self) -> Path:
        """Returns the path of the bundled model download script."""
        return self.models_dir / "download-ggml-model.sh"


class ScratchConfig(BaseModel, frozen=True):
    """Where audio is staged before being handed to the binary."""

    directory: Path


class ServerConfig(BaseModel, frozen=True):
    """HTTP listener configuration."""

    host: str = "0.0.0.0"
    port: int = 6660


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    whisper: WhisperConfig
    scratch: ScratchConfig
    server: ServerConfig


def _optional_float(value: str | None) -> float | None:
    return float(value) if value else None


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        whisper=WhisperConfig(
            whisper_dir=Path(
                os.getenv("WHISPER_DIR", "~/whisper.cpp")
            ).expanduser(),
            default_model=os.getenv("WHISPER_DEFAULT_MODEL", "medium"),
            transcription_model=os.getenv("WHISPER_TRANSCRIPTION_MODEL", "medium"),
            timeout_seconds=_optional_float(os.getenv("WHISPER_TIMEOUT_SECONDS")),
        ),
        scratch=ScratchConfig(
            directory=Path(os.getenv("SCRATCH_DIR", tempfile.gettempdir())),
        ),
        server=ServerConfig(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "6660")),
        ),
    )
