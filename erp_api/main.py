import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from erp_api.config.settings import settings
from erp_api.config.database import SessionLocal, engine
from erp_api.core.error_handlers import register_error_handlers
from erp_api.core.middleware import setup_middleware
from erp_api.shared.database.seed import init_db, seed_initial_data
from erp_api.api.router import api_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 ERP API Starting...")
    logger.info(f"📍 Version: {settings.version}")
    logger.info(f"🌍 Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"⏰ Token Expire: {settings.access_token_expire_minutes} minutes")

    init_db(engine)
    db = SessionLocal()
    try:
        seed_initial_data(db)
    finally:
        db.close()

    yield

    # Shutdown
    logger.info("🛑 ERP API Shutting down...")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Business management backend: users, clients, products, sales and ledger",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware and error handlers
setup_middleware(app)
register_error_handlers(app)

# Include routers
app.include_router(api_router, prefix="/api")

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "ERP API",
        "version": settings.version,
        "status": "running",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "api": "/api"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "erp_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
