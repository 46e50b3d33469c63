"""FastAPI dependency injection configuration."""

from typing import Annotated

from fastapi import Depends

from whisper_gateway.config import AppConfig, load_config
from whisper_gateway.domain import ModelInstaller, StatusChecker
from whisper_gateway.handlers import AudioRequestHandler
from whisper_gateway.infrastructure import (
    AllowAllPolicy,
    LocalScratchStorage,
    ScriptModelDownloader,
    WhisperCliRunner,
)
from whisper_gateway.interfaces import (
    AccessPolicy,
    ModelDownloader,
    ScratchStorage,
    TranscriptionRunner,
)

_config = load_config()

_runner = WhisperCliRunner(
    binary_path=_config.whisper.binary_path,
    model=_config.whisper.transcription_model,
    timeout_seconds=_config.whisper.timeout_seconds,
)
_downloader = ScriptModelDownloader(_config.whisper.download_script)
_scratch = LocalScratchStorage(_config.scratch.directory)
_access_policy = AllowAllPolicy()


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_runner() -> TranscriptionRunner:
    """Returns the configured transcription runner."""
    return _runner


def get_downloader() -> ModelDownloader:
    """Returns the configured model downloader."""
    return _downloader


def get_scratch() -> ScratchStorage:
    """Returns the configured scratch storage."""
    return _scratch


def get_access_policy() -> AccessPolicy:
    """Returns the configured access policy."""
    return _access_policy


ConfigDep = Annotated[AppConfig, Depends(get_config)]


def get_status_checker(config: ConfigDep) -> StatusChecker:
    """Creates a StatusChecker for the configured binary."""
    return StatusChecker(config.whisper.binary_path)


def get_model_installer(
    config: ConfigDep,
    downloader: Annotated[ModelDownloader, Depends(get_downloader)],
) -> ModelInstaller:
    """Creates a ModelInstaller for the configured models directory."""
    return ModelInstaller(config.whisper.models_dir, downloader)


def get_audio_handler(
    scratch: Annotated[ScratchStorage, Depends(get_scratch)],
    runner: Annotated[TranscriptionRunner, Depends(get_runner)],
) -> AudioRequestHandler:
    """Creates an AudioRequestHandler from the injected scratch and runner."""
    return AudioRequestHandler(scratch, runner)
