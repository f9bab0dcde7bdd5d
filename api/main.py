"""UrbanFood Catalog FastAPI Application."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from api.config import get_settings
from api.routers import catalog, categories, products
from api.services.database import DatabaseService, close_db, get_db
from config.logging_config import get_logger, setup_logging

settings = get_settings()

setup_logging(log_level=settings.log_level, log_file=None)
logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} v{settings.version}")
    yield
    close_db()
    logger.info("Database connection closed")


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for browsing the UrbanFood product catalog",
    lifespan=lifespan,
)


class CacheHeaderMiddleware(BaseHTTPMiddleware):
    """Middleware to add Cache-Control headers to responses."""

    # Reference data changes rarely; search results are never cached
    CACHEABLE_PATHS = {
        "/api/categories": 1800,  # 30 minutes
        "/api/catalog/options": 600,  # 10 minutes
        "/api/catalog/locations": 600,  # 10 minutes
        "/api/products": 300,  # 5 minutes
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        if request.method != "GET":
            return response

        path = request.url.path
        for cacheable_path, max_age in self.CACHEABLE_PATHS.items():
            if path.startswith(cacheable_path):
                response.headers["Cache-Control"] = f"public, max-age={max_age}"
                break
        else:
            response.headers["Cache-Control"] = "no-cache"

        return response


app.add_middleware(CacheHeaderMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(catalog.router, prefix="/api/catalog", tags=["Catalog"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "categories": "/api/categories",
            "products": "/api/products",
            "catalog": "/api/catalog",
        },
    }


@app.get("/health")
async def health_check(db: DatabaseService = Depends(get_db)):
    """Health check endpoint."""
    try:
        count = db.fetch_one("SELECT COUNT(*) FROM products")[0]
        return {
            "status": "healthy",
            "database": "connected",
            "total_products": count,
        }
    except Exception as e:
        logger.warning(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }
