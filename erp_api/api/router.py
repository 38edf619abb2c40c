# erp_api/api/router.py
from fastapi import APIRouter

from erp_api.config.settings import settings
from erp_api.modules.auth import auth_router
from erp_api.modules.users import users_router
from erp_api.modules.clients import clients_router
from erp_api.modules.products import products_router
from erp_api.modules.sales import sales_router
from erp_api.modules.financial import financial_router

# Main API router, mounted under /api
api_router = APIRouter()

# ==================== MODULES ====================

api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(clients_router)
api_router.include_router(products_router)
api_router.include_router(sales_router)
api_router.include_router(financial_router)

# ==================== SERVICE ====================

@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "modules": ["auth", "users", "clients", "products", "sales", "financial"]
    }
