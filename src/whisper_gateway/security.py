"""Access control hook applied to every route."""

from typing import Annotated

from fastapi import Depends, HTTPException, WebSocketException, status
from fastapi.requests import HTTPConnection

from whisper_gateway.dependencies import get_access_policy
from whisper_gateway.interfaces import AccessPolicy
from whisper_gateway.logging import setup_logging

logger = setup_logging()


def require_access(
    connection: HTTPConnection,
    policy: Annotated[AccessPolicy, Depends(get_access_policy)],
) -> None:
    """Rejects connections the configured policy does not allow."""
    if policy.authorize(connection):
        return

    logger.warning(
        "Access denied",
        extra={"path": connection.url.path, "client": str(connection.client)},
    )
    if connection.scope["type"] == "websocket":
        raise WebSocketException(code=status.WS_1008_POLICY_VIOLATION)
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
