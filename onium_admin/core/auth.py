"""
Authentication middleware for the Onium admin backend
Validates Supabase Auth access tokens, checks the admins whitelist and
provides the admin session
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import BaseModel
from supabase import Client

from onium_admin.core.config import settings
from onium_admin.core.database import get_supabase
from onium_admin.repositories.admin_repository import AdminRepository

logger = logging.getLogger(__name__)


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)


class AdminSession(BaseModel):
    """Authenticated admin extracted from a Supabase access token"""
    id: str
    email: str
    access_token: str


class AuthConfig:
    """Authentication configuration"""

    @staticmethod
    def get_jwt_secret() -> str:
        """Get the Supabase project's JWT secret"""
        secret = settings.SUPABASE_JWT_SECRET
        if not secret:
            raise ValueError("SUPABASE_JWT_SECRET is not set")
        return secret

    @staticmethod
    def get_jwt_algorithm() -> str:
        """JWT algorithm used by Supabase Auth"""
        return "HS256"

    @staticmethod
    def get_audience() -> str:
        """Audience claim Supabase sets on user access tokens"""
        return "authenticated"


def decode_supabase_token(token: str) -> dict:
    """
    Decode and validate a Supabase Auth access token.

    Supabase access token structure:
    {
        "sub": "user uuid",
        "email": "admin@onium.com",
        "aud": "authenticated",
        "role": "authenticated",
        "exp": 1234567890,
        "iat": 1234567890
    }
    """
    try:
        return jwt.decode(
            token,
            AuthConfig.get_jwt_secret(),
            algorithms=[AuthConfig.get_jwt_algorithm()],
            audience=AuthConfig.get_audience(),
        )
    except JWTError as e:
        error_msg = str(e).lower()
        if "expired" in error_msg:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"}
            )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"}
        )


def session_from_token(token: str) -> AdminSession:
    """Build an AdminSession from a raw access token or raise 401"""
    payload = decode_supabase_token(token)

    user_id = payload.get("sub")
    email = payload.get("email")

    if not user_id or not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload: missing user id or email",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return AdminSession(id=user_id, email=email, access_token=token)


def require_whitelisted(session: AdminSession, admins: AdminRepository) -> AdminSession:
    """Reject a valid Supabase session whose email is not in the admins table (403)"""
    try:
        allowed = admins.is_admin(session.email)
    except Exception as e:
        logger.error(f"Error checking admins whitelist for {session.email}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error checking admin access: {str(e)}"
        )

    if not allowed:
        logger.warning(f"Rejected request from non-admin {session.email}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not an authorized admin"
        )

    return session


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    client: Client = Depends(get_supabase),
) -> AdminSession:
    """
    Dependency that extracts and validates the current admin session.

    The token must be a valid Supabase access token AND its email must be
    in the admins table, checked on every request.

    Usage:
        @router.get("/protected")
        async def protected_route(admin: AdminSession = Depends(get_current_admin)):
            return {"message": f"Hello {admin.email}"}
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"}
        )

    session = session_from_token(credentials.credentials)
    return require_whitelisted(session, AdminRepository(client))
