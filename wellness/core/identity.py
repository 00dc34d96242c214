"""
Caller identity.

Authentication happens upstream (gateway / auth proxy). By the time a
request reaches this service the principal is an opaque string in the
`X-User-Id` header; this module only refuses requests that lack one.
"""
from __future__ import annotations

import hmac
from typing import Optional

from fastapi import Header

from wellness.core.config import settings
from wellness.core.errors import NotAuthorizedError


def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, description="Pre-authenticated principal."),
) -> str:
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise NotAuthorizedError()
    return user_id


def require_admin(
    x_admin_token: Optional[str] = Header(default=None, description="Administrative shared secret."),
) -> None:
    expected = settings.ADMIN_TOKEN
    if not expected or not x_admin_token or not hmac.compare_digest(x_admin_token, expected):
        raise NotAuthorizedError("Administrative token missing or invalid.", forbidden=True)
