"""Domain layer containing business logic and models."""

from .model_installer import ModelInstaller
from .models import ModelInstallResult, TranscriptionMode
from .status_checker import StatusChecker

__all__ = [
    "ModelInstaller",
    "ModelInstallResult",
    "StatusChecker",
    "TranscriptionMode",
]
