"""Live transcription over a WebSocket."""

import io
from typing import Annotated

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from fastapi.concurrency import run_in_threadpool
from fastapi.websockets import WebSocketState

from whisper_gateway.dependencies import get_audio_handler
from whisper_gateway.domain import TranscriptionMode
from whisper_gateway.exceptions import ScratchFileError, TranscriptionError
from whisper_gateway.handlers import AudioRequestHandler
from whisper_gateway.logging import setup_logging

logger = setup_logging()

router = APIRouter(tags=["stream"])

HandlerDep = Annotated[AudioRequestHandler, Depends(get_audio_handler)]

STREAM_FILE_NAME = "live_audio.wav"
FAILURE_MESSAGE = "Transcription failed"


@router.websocket("/stream")
async def stream_audio(websocket: WebSocket, handler: HandlerDep):
    """
    Transcribes every binary message received on the socket.

    Messages are handled one at a time: the next one is not read until the
    reply to the current one has been sent. A failed transcription is answered
    with FAILURE_MESSAGE and the session keeps going.
    """
    await websocket.accept()
    logger.info("Stream session opened", extra={"client": str(websocket.client)})

    close_code = status.WS_1000_NORMAL_CLOSURE
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                logger.info(
                    "Stream session closed", extra={"code": message.get("code")}
                )
                break

            audio_data = message.get("bytes")
            if audio_data is None:
                logger.warning("Non-binary stream message rejected")
                await websocket.send_text(FAILURE_MESSAGE)
                continue

            try:
                text = await run_in_threadpool(
                    handler.process,
                    io.BytesIO(audio_data),
                    STREAM_FILE_NAME,
                    TranscriptionMode.TRANSCRIBE,
                )
            except (ScratchFileError, TranscriptionError):
                await websocket.send_text(FAILURE_MESSAGE)
                continue

            await websocket.send_text(text)
    except WebSocketDisconnect as e:
        logger.info("Stream session dropped", extra={"code": e.code})
    except Exception:
        logger.exception("Stream session failed")
        close_code = status.WS_1011_INTERNAL_ERROR
    finally:
        if websocket.client_state == WebSocketState.CONNECTED:
            try:
                await websocket.close(code=close_code)
            except (OSError, RuntimeError):
                logger.info("Stream socket already gone on close")
