"""
Admin authentication.

A single configured username/password pair compared in plaintext; success
yields the bearer token that gates the admin routes.
"""

from fastapi import HTTPException, status

from dayuse.core.config import get_settings
from dayuse.core.logging import get_logger
from dayuse.core.metrics import record_login
from dayuse.core.security import create_access_token
from dayuse.schemas.auth import AdminLogin

logger = get_logger(__name__)


def check_admin_credentials(username: str, password: str) -> bool:
    settings = get_settings()
    return username == settings.ADMIN_USERNAME and password == settings.ADMIN_PASSWORD


def authenticate_admin(login_data: AdminLogin) -> str:
    """
    Authenticate the administrator and return an access token.
    Raises 401 if credentials do not match.
    """
    if not check_admin_credentials(login_data.username, login_data.password):
        record_login(False)
        logger.warning("admin_login_failed", username=login_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    record_login(True)
    logger.info("admin_logged_in", username=login_data.username)
    return create_access_token(data={"sub": login_data.username, "role": "admin"})
