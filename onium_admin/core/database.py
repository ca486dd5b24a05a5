"""
Conexión a Supabase

Este módulo centraliza el acceso al proyecto Supabase:
- Cliente de datos (service role) para las tablas de la tienda
- Clientes de autenticación efímeros para el inicio de sesión

Author: TM3
Updated: 2025-10-17
"""
import logging
from functools import lru_cache

from supabase import Client, ClientOptions, create_client

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# Data client (service role, shared per process)
# ============================================================================

@lru_cache(maxsize=1)
def _data_client() -> Client:
    logger.info("Creating Supabase data client")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


def get_supabase() -> Client:
    """
    FastAPI dependency para obtener cliente de Supabase

    Usage:
        @app.get("/data")
        def get_data(sb: Client = Depends(get_supabase)):
            ...
    """
    return _data_client()


# ============================================================================
# Auth clients (one per sign-in, nothing persisted)
# ============================================================================

def get_auth_client() -> Client:
    """
    FastAPI dependency returning a fresh anon-key client for GoTrue calls

    The client never persists or refreshes a session, so signing one admin
    in does not leak that session into other requests.
    """
    return create_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_ANON_KEY,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )
