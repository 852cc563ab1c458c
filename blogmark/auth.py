"""Admin access: allow-list check on the proxy-supplied email header."""

from __future__ import annotations

import enum
import logging
from urllib.parse import quote

from fastapi import Depends, HTTPException, Request

EMAIL_HEADER = "X-ExeDev-Email"

logger = logging.getLogger("blogmark.auth")


class AdminCheck(enum.Enum):
    ALLOWED = "allowed"
    LOGIN = "login"
    FORBIDDEN = "forbidden"


def check_admin(email: str, admin_emails: list[str], *, dev_mode: bool = False) -> AdminCheck:
    """Decide whether email may use the admin surface.

    An empty allow-list admits any signed-in user.
    """
    if dev_mode:
        return AdminCheck.ALLOWED
    email = email.strip()
    if not email:
        return AdminCheck.LOGIN
    if not admin_emails:
        return AdminCheck.ALLOWED
    if any(email.casefold() == admin.strip().casefold() for admin in admin_emails):
        return AdminCheck.ALLOWED
    return AdminCheck.FORBIDDEN


async def require_admin(request: Request) -> str:
    """FastAPI dependency: return the admin's email or raise."""
    from blogmark.config import settings

    email = request.headers.get(EMAIL_HEADER, "").strip()
    decision = check_admin(email, settings.admin_emails, dev_mode=settings.dev_mode)
    if decision is AdminCheck.ALLOWED:
        return email
    if decision is AdminCheck.LOGIN:
        location = f"{settings.login_url}?redirect={quote(request.url.path)}"
        raise HTTPException(status_code=302, detail="Login required", headers={"Location": location})
    logger.info("Admin access denied for %s", email)
    raise HTTPException(status_code=403, detail="Forbidden")


AdminEmail = Depends(require_admin)
