"""Domain models for the whisper gateway."""

from enum import Enum

from pydantic import BaseModel


class TranscriptionMode(str, Enum):
    """How the whisper binary should treat the audio."""

    TRANSCRIBE = "transcribe"
    TRANSLATE = "translate"


class ModelInstallResult(BaseModel, frozen=True):
    """Outcome of ensuring a model file is present."""

    model: str
    already_installed: bool
