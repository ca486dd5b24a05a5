"""
Configuración centralizada de la aplicación
"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Onium Admin API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Backend de administración para la tienda Onium"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Supabase
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str
    SUPABASE_SERVICE_ROLE_KEY: str
    # Used to verify access tokens issued by Supabase Auth (HS256)
    SUPABASE_JWT_SECRET: str
    ADMINS_TABLE: str = "admins"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:5173,https://yourdomain.com" or '["http://localhost:5173"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:5173,http://localhost:3000"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:5173"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # Image hosting (Cloudinary unsigned uploads)
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_UPLOAD_PRESET: str = "OniumProducts"

    # Dashboard / listing behaviour
    LOW_STOCK_THRESHOLD: int = 5
    DASHBOARD_TOP_N: int = 5
    ORDERS_PAGE_SIZE: int = 10

    # Store details printed on invoices
    STORE_NAME: str = "ONIUM."
    STORE_CONTACT: str = "+92 323 1550147"
    STORE_LOCATION: str = "Islamabad, Pakistan"
    CURRENCY_SYMBOL: str = "Rs"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
