"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from whisper_gateway.dependencies import get_config
from whisper_gateway.logging import setup_logging
from whisper_gateway.response_models import ErrorResponse
from whisper_gateway.routes import (
    audio_router,
    models_router,
    status_router,
    stream_router,
)
from whisper_gateway.routes.audio import AUDIO_REQUIRED
from whisper_gateway.security import require_access

patch_all()
logger = setup_logging()

app = FastAPI(title="Whisper Gateway", dependencies=[Depends(require_access)])
app.include_router(status_router)
app.include_router(models_router)
app.include_router(audio_router)
app.include_router(stream_router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Renders every HTTP error as {"error": <detail>}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Renders validation failures in the {"error": ...} shape.

    An `audio` form part that is not a file counts as a missing upload.
    """
    if any(tuple(error["loc"]) == ("body", "audio") for error in exc.errors()):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=AUDIO_REQUIRED).model_dump(),
        )

    logger.warning("Request validation failed", extra={"path": request.url.path})
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(error="Invalid request").model_dump(),
    )


def run() -> None:
    """Starts the API server on the configured host and port."""
    config = get_config()
    logger.info(
        "Whisper gateway starting",
        extra={
            "host": config.server.host,
            "port": config.server.port,
            "whisper_binary": str(config.whisper.binary_path),
        },
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    run()
