"""Transcription and translation endpoints for uploaded audio."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from whisper_gateway.dependencies import get_audio_handler
from whisper_gateway.domain import TranscriptionMode
from whisper_gateway.exceptions import ScratchFileError, TranscriptionError
from whisper_gateway.handlers import AudioRequestHandler
from whisper_gateway.logging import setup_logging
from whisper_gateway.response_models import (
    ErrorResponse,
    TranscriptionResponse,
    TranslationResponse,
)

logger = setup_logging()

router = APIRouter(tags=["audio"])

HandlerDep = Annotated[AudioRequestHandler, Depends(get_audio_handler)]
AudioUpload = Annotated[UploadFile | None, File()]

AUDIO_REQUIRED = "Audio file required"

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _process_upload(
    handler: AudioRequestHandler,
    audio: UploadFile | None,
    mode: TranscriptionMode,
) -> str:
    if audio is None or not audio.filename:
        raise HTTPException(status_code=400, detail=AUDIO_REQUIRED)

    logger.info(
        "Received audio upload",
        extra={"file_name": audio.filename, "size": audio.size, "mode": mode.value},
    )

    try:
        return handler.process(audio.file, audio.filename, mode)
    except (ScratchFileError, TranscriptionError):
        failure = "Translation" if mode is TranscriptionMode.TRANSLATE else "Transcription"
        raise HTTPException(status_code=500, detail=f"{failure} failed")


@router.post(
    "/transcribe", response_model=TranscriptionResponse, responses=_ERROR_RESPONSES
)
def transcribe_audio(
    handler: HandlerDep, audio: AudioUpload = None
) -> TranscriptionResponse:
    """Transcribes the uploaded audio in its spoken language."""
    text = _process_upload(handler, audio, TranscriptionMode.TRANSCRIBE)
    return TranscriptionResponse(transcription=text)


@router.post(
    "/translate", response_model=TranslationResponse, responses=_ERROR_RESPONSES
)
def translate_audio(
    handler: HandlerDep, audio: AudioUpload = None
) -> TranslationResponse:
    """Translates the uploaded audio into English text."""
    text = _process_upload(handler, audio, TranscriptionMode.TRANSLATE)
    return TranslationResponse(translation=text)
