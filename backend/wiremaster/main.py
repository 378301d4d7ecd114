"""
Wire Master - FastAPI Application

Backend entry point: serves generated levels.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from .config import settings
from .logging_config import configure_logging
from .api import levels
from .middleware.security import limiter, add_security_headers

logger = logging.getLogger(__name__)


# ============================================
# LIFESPAN
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events."""
    configure_logging()
    logger.info("Starting %s (environment=%s, debug=%s)", settings.APP_NAME, settings.ENVIRONMENT, settings.DEBUG)
    logger.info("Levels 1..%d, cache size %d", settings.MAX_LEVEL, settings.LEVEL_CACHE_SIZE)

    yield

    logger.info("Shutting down...")


# ============================================
# APP
# ============================================

app = FastAPI(
    title=settings.APP_NAME,
    description="Wire Master API - procedural wire puzzle levels",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# Rate limiter state
app.state.limiter = limiter


# ============================================
# MIDDLEWARE
# ============================================

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Security headers
app.middleware("http")(add_security_headers)


# ============================================
# ERROR HANDLERS
# ============================================

@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Rate limit errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please try again later."}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global error handler."""
    # No error details outside debug mode
    if settings.DEBUG:
        detail = str(exc)
    else:
        detail = "Internal server error"
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)

    return JSONResponse(
        status_code=500,
        content={"detail": detail}
    )


# ============================================
# ROUTES
# ============================================

api_prefix = settings.API_PREFIX

app.include_router(levels.router, prefix=api_prefix)


# ============================================
# HEALTH CHECK
# ============================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "version": "1.0.0"
    }


@app.get(f"{api_prefix}/health")
async def api_health_check():
    """API health check."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "debug": settings.DEBUG,
        "max_level": settings.MAX_LEVEL,
        "verify_solvable": settings.GENERATOR_VERIFY_SOLVABLE,
    }


# ============================================
# ROOT
# ============================================

@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs" if settings.DEBUG else None,
        "health": "/health",
    }


# ============================================
# RUN
# ============================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "wiremaster.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
