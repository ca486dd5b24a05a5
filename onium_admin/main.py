"""
Onium Admin - Backend API
Administración de la tienda Onium sobre Supabase
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from onium_admin.api import auth, customers, dashboard, deals, orders, products, reviews, uploads
from onium_admin.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/api/v1/dashboard/"

# Sections of the admin UI and the endpoint backing each one
SECTIONS = {
    "login": "/api/v1/auth/login",
    "dashboard": DASHBOARD_PATH,
    "products": "/api/v1/products/",
    "deals": "/api/v1/deals/",
    "orders": "/api/v1/orders/",
    "customers": "/api/v1/customers/",
    "reviews": "/api/v1/reviews/",
}

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(auth.router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["Dashboard"])
app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
app.include_router(deals.router, prefix="/api/v1/deals", tags=["Deals"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])
app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])
app.include_router(reviews.router, prefix="/api/v1/reviews", tags=["Reviews"])
app.include_router(uploads.router, prefix="/api/v1/uploads", tags=["Uploads"])


@app.exception_handler(StarletteHTTPException)
async def redirect_unknown_paths(request: Request, exc: StarletteHTTPException):
    """Unknown GET paths go to the dashboard; every other HTTP error is returned as-is"""
    # No route matched when the router never set an endpoint
    if exc.status_code == 404 and request.method == "GET" and "endpoint" not in request.scope:
        return RedirectResponse(url=DASHBOARD_PATH)
    return await http_exception_handler(request, exc)


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Onium Admin API",
        "status": "online",
        "version": settings.API_VERSION,
        "sections": SECTIONS,
    }


@app.get("/health")
async def health():
    """Health check endpoint para monitoreo"""
    return {
        "status": "healthy",
        "service": "onium-admin-api",
        "version": settings.API_VERSION,
        "supabase": {
            "configured": bool(settings.SUPABASE_URL),
        },
        "cloudinary": {
            "configured": bool(settings.CLOUDINARY_CLOUD_NAME),
        },
    }
