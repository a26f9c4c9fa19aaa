"""Shared-secret API key check for the /api routes"""
import logging
import secrets
from typing import Optional
from fastapi import Depends, Header, HTTPException, Query, Request, status
from booking_engine.core.metrics import auth_rejections

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def _matches(candidate: Optional[str], secret: str) -> bool:
    if candidate is None:
        return False
    return secrets.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))


class ApiKeyGate:
    """Accepts a request when it presents the configured secret.

    The secret can arrive as ``Authorization: Bearer <secret>``, as an
    ``x-api-key`` header or as an ``api_key`` query parameter. Matching is
    exact: no trimming, no case folding. With an empty secret every request
    is accepted.
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: Optional[str] = None):
        self._secret = secret or ""

    @property
    def open_mode(self) -> bool:
        return not self._secret

    def is_authorized(
        self,
        authorization: Optional[str] = None,
        x_api_key: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> bool:
        if self.open_mode:
            return True

        via_bearer = (
            authorization is not None
            and authorization.startswith(BEARER_PREFIX)
            and _matches(authorization[len(BEARER_PREFIX):], self._secret)
        )
        via_header = _matches(x_api_key, self._secret)
        via_query = _matches(api_key, self._secret)
        return via_bearer or via_header or via_query


def get_api_key_gate(request: Request) -> ApiKeyGate:
    return request.app.state.api_key_gate


async def require_api_key(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    x_api_key: Optional[str] = Header(default=None),
    api_key: Optional[str] = Query(default=None),
    gate: ApiKeyGate = Depends(get_api_key_gate),
) -> None:
    if gate.is_authorized(authorization, x_api_key, api_key):
        return

    auth_rejections.inc()
    logger.warning(f"Rejected {request.method} {request.url.path}: missing or invalid API key")
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
