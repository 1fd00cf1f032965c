from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import time

from nxcube import __version__ as engine_version
from nxcube.config import settings
from nxcube.exceptions import CubeError
from nxcube.logging import get_logger
from app.api.v1.api import api_router
from app.utils.error_handlers import StandardErrorHandler

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Default cube size: {settings.default_cube_size}, max: {settings.max_cube_size}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Stateless API over the N x N x N cube state and move engine",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# Exception handlers
@app.exception_handler(CubeError)
async def cube_error_handler(request: Request, exc: CubeError):
    return StandardErrorHandler.handle_cube_error(request, exc)


# Health check endpoint
@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.
    """
    return {
        "status": "healthy",
        "version": settings.app_version,
        "timestamp": time.time(),
        "environment": "development" if settings.debug else "production"
    }


@app.get("/", tags=["root"])
async def root():
    return "API is running... Visit /docs for documentation"


# Include API routes (single versioned prefix)
app.include_router(api_router, prefix="/api/v1")


@app.get("/api/v1/info", tags=["info"])
async def api_info():
    """
    Get API information and capabilities.
    """
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "engine_version": engine_version,
        "features": [
            "move_application",
            "slice_moves",
            "scrambling",
            "state_validation",
        ],
        "max_cube_size": settings.max_cube_size,
        "endpoints": {
            "solved": "/api/v1/cube/solved",
            "moves": "/api/v1/cube/moves",
            "validate": "/api/v1/cube/validate",
            "scramble": "/api/v1/cube/scramble",
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
