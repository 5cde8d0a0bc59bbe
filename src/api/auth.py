"""Basic authentication middleware for the invoice endpoints

A single shared username/password pair, enabled through BASIC_AUTH_ENABLE.
Runs before request parsing so unauthenticated requests never reach a handler.
"""

import base64
import binascii
import logging
import secrets
from typing import Optional, Tuple
from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from src.api.error import message_response

logger = logging.getLogger(__name__)


def extract_credentials(request: Request) -> Optional[Tuple[str, str]]:
    """Return (username, password) from a Basic Authorization header, or None"""
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None

    scheme, _, encoded = authorization.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        return None

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return username, password


class BasicAuthMiddleware(BaseHTTPMiddleware):
    """Reject requests under protected_prefix without the expected credentials"""

    def __init__(self, app, username: str, password: str, protected_prefix: str):
        super().__init__(app)
        self.username = username.encode("utf-8")
        self.password = password.encode("utf-8")
        self.protected_prefix = protected_prefix

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(self.protected_prefix):
            return await call_next(request)

        credentials = extract_credentials(request)
        if credentials is None:
            return message_response(
                status.HTTP_401_UNAUTHORIZED, "Authorization Header doesn't exist"
            )

        if not self._is_valid(*credentials):
            logger.warning(f"Rejected credentials for {request.url.path}")
            return message_response(status.HTTP_401_UNAUTHORIZED, "Unauthorized")

        return await call_next(request)

    def _is_valid(self, username: str, password: str) -> bool:
        username_ok = secrets.compare_digest(username.encode("utf-8"), self.username)
        password_ok = secrets.compare_digest(password.encode("utf-8"), self.password)
        return username_ok and password_ok
