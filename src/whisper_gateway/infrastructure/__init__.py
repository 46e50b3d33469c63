"""Concrete implementations of infrastructure interfaces."""

from .allow_all_policy import AllowAllPolicy
from .download_script import ScriptModelDownloader
from .local_scratch import LocalScratchStorage
from .whisper_cli import WhisperCliRunner

__all__ = [
    "AllowAllPolicy",
    "LocalScratchStorage",
    "ScriptModelDownloader",
    "WhisperCliRunner",
]
