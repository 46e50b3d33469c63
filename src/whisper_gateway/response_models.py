"""Response models for the whisper gateway API."""

from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Installation status of the whisper binary."""

    status: str


class MessageResponse(BaseModel):
    """Human-readable outcome of a model installation."""

    message: str


class TranscriptionResponse(BaseModel):
    transcription: str


class TranslationResponse(BaseModel):
    translation: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
