"""Request handlers orchestrating domain and infrastructure."""

from .audio_request_handler import AudioRequestHandler

__all__ = ["AudioRequestHandler"]
