"""API routers."""

from .audio import router as audio_router
from .models import router as models_router
from .status import router as status_router
from .stream import router as stream_router

__all__ = ["audio_router", "models_router", "status_router", "stream_router"]
