"""Abstract interface for request authorization."""

from abc import ABC, abstractmethod

from fastapi.requests import HTTPConnection


class AccessPolicy(ABC):
    """Decides whether an incoming HTTP request or WebSocket may proceed."""

    @abstractmethod
    def authorize(self, connection: HTTPConnection) -> bool:
        """Returns True when the connection is allowed."""
