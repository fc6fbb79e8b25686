"""
Access guards for the admin and reset routes.

Admin reports are protected by a single shared password taken from the
configuration document and sent by clients in the ``X-Admin-Password``
header.  An empty configured password locks the admin routes entirely.
The bulk reset route is switched on or off per deployment with the
``ALLOW_RESET`` environment variable.  Both guards are FastAPI
dependencies.
"""

import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException, status

from .config import settings
from slot_booking_api.app.services.config_service import ConfigService

logger = logging.getLogger(__name__)


def check_admin_password(supplied: Optional[str], expected: str) -> bool:
    """Return True when ``expected`` is set and ``supplied`` equals it."""
    if not expected or supplied is None:
        return False
    # Constant‑time comparison to prevent timing attacks
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def require_admin(x_admin_password: Optional[str] = Header(default=None)) -> None:
    """Dependency that rejects requests without the admin password.

    The configuration is read on every request so a password change
    takes effect immediately.  The 401 response is the same whatever
    was wrong with the header.
    """
    expected = ConfigService.get_config().admin_password
    if not check_admin_password(x_admin_password, expected):
        logger.warning("Rejected admin request with missing or wrong password")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )


def require_reset_enabled() -> None:
    """Dependency that refuses the reset route unless ``ALLOW_RESET`` is on."""
    if not settings.allow_reset:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Reset is disabled. Set ALLOW_RESET=true to enable.",
        )
