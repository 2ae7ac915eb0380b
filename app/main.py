# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi import FastAPI, Request, status

from app.core.config import get_settings
from app.core.errors import InternalComputationError, NotFoundError
from app.database import load_catalog

# Routers
from app.routers.users import router as users_router
from app.routers.products import router as products_router
from app.routers.cart import router as cart_router
from app.routers.posts import router as posts_router
from app.routers.todos import router as todos_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Load the static catalog into memory, once.

    Shutdown:
      - Nothing to release; the catalog is plain memory.
    """
    logger.info("🔄 Startup: Loading catalog from %s ...", settings.DATA_DIR)
    try:
        app.state.catalog = load_catalog(settings.DATA_DIR)
        logger.info("✅ Startup: Catalog loaded %s", app.state.catalog.counts())
    except Exception as e:
        logger.error(f"❌ Startup: Catalog load FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Domain errors -> HTTP ---


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(InternalComputationError)
async def computation_error_handler(request: Request, exc: InternalComputationError):
    logger.error(
        "Simulated write failed on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Could not compute the simulated result"},
    )


app.include_router(products_router, prefix=settings.API_V1_STR)
app.include_router(cart_router, prefix=settings.API_V1_STR)
app.include_router(users_router, prefix=settings.API_V1_STR)
app.include_router(posts_router, prefix=settings.API_V1_STR)
app.include_router(todos_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "mock-catalog-api"}
