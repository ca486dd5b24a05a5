"""
Authentication API endpoints for the Onium admin backend
- Sign in through Supabase Auth (admins whitelist enforced)
- Session restore and sign out
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr
from supabase import Client

from onium_admin.api.deps import get_admin_repository
from onium_admin.core.auth import AdminSession, get_current_admin
from onium_admin.core.database import get_auth_client, get_supabase
from onium_admin.repositories.admin_repository import AdminRepository
from onium_admin.services.auth_service import AuthenticationError, AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    refresh_token: str


def get_auth_service(
    auth_client: Client = Depends(get_auth_client),
    admins: AdminRepository = Depends(get_admin_repository),
) -> AuthService:
    return AuthService(auth_client, admins)


def _auth_failed(error: AuthenticationError) -> HTTPException:
    code = status.HTTP_403_FORBIDDEN if error.not_whitelisted else status.HTTP_401_UNAUTHORIZED
    return HTTPException(status_code=code, detail=str(error), headers={"WWW-Authenticate": "Bearer"})


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/login")
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Sign in with email and password; only whitelisted admins get a session"""
    try:
        session = service.sign_in(payload.email, payload.password)
    except AuthenticationError as e:
        raise _auth_failed(e)

    return session.model_dump(exclude={"admin": {"access_token"}})


@router.post("/refresh")
async def refresh(payload: RefreshRequest, service: AuthService = Depends(get_auth_service)):
    """Restore a session from a refresh token"""
    try:
        session = service.refresh(payload.refresh_token)
    except AuthenticationError as e:
        raise _auth_failed(e)

    return session.model_dump(exclude={"admin": {"access_token"}})


@router.get("/session")
async def current_session(admin: AdminSession = Depends(get_current_admin)):
    """The admin the bearer token belongs to"""
    return {"id": admin.id, "email": admin.email}


@router.post("/logout")
async def logout(
    admin: AdminSession = Depends(get_current_admin),
    service: AuthService = Depends(get_auth_service),
    client: Client = Depends(get_supabase),
):
    """Revoke the current session"""
    try:
        service.sign_out(admin, client)
    except Exception as e:
        logger.error(f"Error signing out {admin.email}: {e}")
        raise HTTPException(status_code=500, detail=f"Error signing out: {str(e)}")

    return {"status": "success", "message": "Signed out"}
