"""
Auth Service
Signs admins in through Supabase Auth and checks them against the admins
whitelist

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional

from pydantic import BaseModel
from supabase import Client

from onium_admin.core.auth import AdminSession
from onium_admin.repositories.admin_repository import AdminRepository

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Sign-in rejected; message is safe to show to the user"""

    def __init__(self, message: str, not_whitelisted: bool = False):
        super().__init__(message)
        self.not_whitelisted = not_whitelisted


class AuthSession(BaseModel):
    """Tokens handed back to the admin UI after sign-in or refresh"""
    access_token: str
    refresh_token: str
    expires_at: Optional[int] = None
    token_type: str = "bearer"
    admin: AdminSession


def _to_auth_session(response) -> AuthSession:
    session = response.session
    user = response.user or session.user
    return AuthSession(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=session.expires_at,
        admin=AdminSession(id=str(user.id), email=user.email or "", access_token=session.access_token),
    )


class AuthService:
    """
    Session lifecycle for the admin backend

    Uses a per-request anon client for GoTrue calls and the admins
    repository (service role) for the whitelist.
    """

    def __init__(self, auth_client: Client, admin_repository: AdminRepository):
        self.auth_client = auth_client
        self.admin_repository = admin_repository

    def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Authenticate with Supabase Auth, then require a whitelist entry

        Raises:
            AuthenticationError: bad credentials, or the account is not an admin
                (its fresh session is signed out again)
        """
        try:
            response = self.auth_client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.warning(f"Sign in failed for {email}: {e}")
            raise AuthenticationError("Invalid credentials") from e

        if response is None or response.session is None:
            logger.warning(f"Sign in for {email} returned no session")
            raise AuthenticationError("Invalid credentials")

        if not self.admin_repository.is_admin(email):
            logger.warning(f"Sign in rejected, {email} is not in the admins table")
            self.auth_client.auth.sign_out()
            raise AuthenticationError("Not an authorized admin", not_whitelisted=True)

        logger.info(f"Admin signed in: {email}")
        return _to_auth_session(response)

    def refresh(self, refresh_token: str) -> AuthSession:
        """Restore a session from its refresh token"""
        try:
            response = self.auth_client.auth.refresh_session(refresh_token)
        except Exception as e:
            logger.warning(f"Session refresh failed: {e}")
            raise AuthenticationError("Session expired") from e

        if response is None or response.session is None:
            raise AuthenticationError("Session expired")

        auth_session = _to_auth_session(response)
        if not self.admin_repository.is_admin(auth_session.admin.email):
            logger.warning(f"Refresh rejected, {auth_session.admin.email} is not in the admins table")
            self.auth_client.auth.sign_out()
            raise AuthenticationError("Not an authorized admin", not_whitelisted=True)
        return auth_session

    def sign_out(self, admin: AdminSession, service_client: Client) -> None:
        """Revoke the admin's session on the Supabase side"""
        service_client.auth.admin.sign_out(admin.access_token)
        logger.info(f"Admin signed out: {admin.email}")
