"""Model installation endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from whisper_gateway.dependencies import ConfigDep, get_model_installer
from whisper_gateway.domain import ModelInstaller
from whisper_gateway.exceptions import InvalidModelNameError, ModelInstallError
from whisper_gateway.logging import setup_logging
from whisper_gateway.response_models import ErrorResponse, MessageResponse

logger = setup_logging()

router = APIRouter(tags=["models"])

InstallerDep = Annotated[ModelInstaller, Depends(get_model_installer)]


@router.get(
    "/install-model",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def install_model(
    installer: InstallerDep,
    config: ConfigDep,
    model: str | None = None,
) -> MessageResponse:
    """
    Ensures a ggml model is present, downloading it when missing.

    The download runs synchronously; the response is sent once it finishes.
    """
    model = model or config.whisper.default_model

    try:
        result = installer.ensure(model)
    except InvalidModelNameError:
        raise HTTPException(status_code=400, detail="Invalid model name")
    except ModelInstallError:
        raise HTTPException(status_code=500, detail="Failed to install model")

    if result.already_installed:
        return MessageResponse(message=f"Model {model} is already installed")
    return MessageResponse(message=f"Model {model} installed")
