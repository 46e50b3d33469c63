"""Default AccessPolicy that lets every connection through."""

from fastapi.requests import HTTPConnection

from whisper_gateway.interfaces import AccessPolicy


class AllowAllPolicy(AccessPolicy):
    """Placeholder policy until a real authentication scheme is plugged in."""

    def authorize(self, connection: HTTPConnection) -> bool:
        return True
