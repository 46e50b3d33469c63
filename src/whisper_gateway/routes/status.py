"""Whisper installation status endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from whisper_gateway.dependencies import get_status_checker
from whisper_gateway.domain import StatusChecker
from whisper_gateway.logging import setup_logging
from whisper_gateway.response_models import StatusResponse

logger = setup_logging()

router = APIRouter(tags=["status"])

StatusCheckerDep = Annotated[StatusChecker, Depends(get_status_checker)]


@router.get(
    "/status",
    response_model=StatusResponse,
    responses={500: {"model": StatusResponse}},
)
def check_whisper_status(checker: StatusCheckerDep):
    """Reports whether the whisper binary is present on disk."""
    if not checker.is_installed():
        logger.warning("Whisper binary not found")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=StatusResponse(status="Whisper is NOT installed").model_dump(),
        )
    return StatusResponse(status="Whisper is installed")
