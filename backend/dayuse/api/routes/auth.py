"""
Authentication endpoint: admin login.
"""

from fastapi import APIRouter

from dayuse.schemas.auth import AdminLogin, Token
from dayuse.services.auth_service import authenticate_admin

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=Token)
async def login(login_data: AdminLogin):
    """Authenticate the administrator and receive a bearer token."""
    token = authenticate_admin(login_data)
    return Token(access_token=token)
