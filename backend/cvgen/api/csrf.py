"""
Cookie-based anti-forgery tokens.

A random secret lives in an HttpOnly cookie; every rendered form gets a
fresh token derived from it (salt + digest of salt and secret). A POST is
accepted only when its ``_csrf`` field matches the cookie's secret.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
from typing import Optional

from starlette.requests import Request
from starlette.responses import Response

CSRF_COOKIE_NAME = "_csrf"
CSRF_FIELD_NAME = "_csrf"

CSRF_ERROR_MESSAGE = (
    "Invalid form submission token. Please refresh the page and try again. "
    "Ensure cookies are enabled in your browser."
)


class CSRFError(Exception):
    pass


def _digest(salt: str, secret: str) -> str:
    raw = hashlib.sha256(f"{salt}-{secret}".encode("utf-8")).digest()
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def new_secret() -> str:
    return secrets.token_urlsafe(18)


def secret_from(request: Request) -> Optional[str]:
    return request.cookies.get(CSRF_COOKIE_NAME) or None


def generate_token(secret: str) -> str:
    salt = secrets.token_hex(4)
    return f"{salt}-{_digest(salt, secret)}"


def verify_token(secret: Optional[str], token: Optional[str]) -> bool:
    if not secret or not token or "-" not in token:
        return False
    salt, _, digest = token.partition("-")
    try:
        submitted = digest.encode("ascii")
    except UnicodeEncodeError:
        return False
    return hmac.compare_digest(submitted, _digest(salt, secret).encode("ascii"))


def validate_request(request: Request, token: Optional[str]) -> None:
    """Raise CSRFError unless ``token`` was issued for this client's cookie."""
    if not verify_token(secret_from(request), token):
        raise CSRFError("CSRF token validation failed")


def set_secret_cookie(response: Response, secret: str, secure: bool = False) -> None:
    response.set_cookie(
        CSRF_COOKIE_NAME,
        secret,
        httponly=True,
        samesite="lax",
        secure=secure,
    )
