#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Optional

from fastapi import Header

from .exceptions import AuthenticationRequiredException

USER_ID_HEADER = "X-User-Id"


def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias=USER_ID_HEADER)
) -> str:
    """
    Resolve the authenticated user.

    The upstream session layer verifies the user and forwards their id in
    the ``X-User-Id`` header.

    Raises:
        AuthenticationRequiredException: If the header is missing or blank.
    """
    if not x_user_id or not x_user_id.strip():
        raise AuthenticationRequiredException("Authentication required")
    return x_user_id.strip()
