"""Abstract interfaces for infrastructure dependencies."""

from .access_policy import AccessPolicy
from .model_downloader import ModelDownloader
from .scratch_storage import ScratchStorage
from .transcription_runner import TranscriptionRunner

__all__ = ["AccessPolicy", "ModelDownloader", "ScratchStorage", "TranscriptionRunner"]
