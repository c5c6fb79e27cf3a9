"""Caller identity dependency.

Requests reach the service through an authenticating gateway that stamps the
verified caller identity on each request; this module only extracts it.
"""
from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status

from payment_escrow.config import CALLER_HEADER
from payment_escrow.utils.errors import error_response


def _extract_caller(
    authorization: str | None = Header(default=None),
    x_caller_id: str | None = Header(default=None, alias=CALLER_HEADER),
) -> str | None:
    """Read the caller from X-Caller-Id or Authorization: Bearer ..."""
    if x_caller_id and x_caller_id.strip():
        return x_caller_id.strip()
    if authorization and authorization.startswith("Bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    return None


def require_caller(caller: str | None = Depends(_extract_caller)) -> str:
    """Return the verified caller identity or reject the request with 401."""
    if not caller:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_response("NO_CALLER_IDENTITY", "Caller identity required."),
        )
    return caller


__all__ = ["require_caller"]
