# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Curio API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 3001
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    CurioException,
    curio_exception_handler,
    validation_exception_handler,
)
from app.auth import routes as auth_routes
from app.auth.session_gate import session_gate
from app.routers import health, users, pages

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration and shutdown. The Supabase client is
    created lazily on first use.
    """
    logger.info(f"Starting Curio API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Curio API")


# Create FastAPI application
app = FastAPI(
    title="Curio API",
    description="""
## Curio API

Backend for the Curio frontend.

### Authentication

- API routes marked as protected need an `Authorization: Bearer <token>` header.
  Only the presence of a token is checked; it is **not** verified yet.
- Browser navigations to `/dashboard/*`, `/login` and `/signup` are gated on a
  session cookie and redirected accordingly.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Sign in, sign up and sign out through Supabase Auth",
        },
        {
            "name": "Users",
            "description": "Register users and issue access tokens",
        },
        {
            "name": "Pages",
            "description": "Session-gated page routes",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# Session gate for page navigations
app.middleware("http")(session_gate)

# CORS middleware - allows requests from the frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(CurioException)
async def handle_curio_exception(request: Request, exc: CurioException):
    """Handle custom Curio exceptions."""
    return await curio_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request body/query validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Supabase Auth endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/auth",
    tags=["Auth"]
)

# User registration and login
app.include_router(
    users.router,
    prefix="/api/users",
    tags=["Users"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# Gated pages
app.include_router(
    pages.router,
    tags=["Pages"]
)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - returns a welcome message."""
    return {"message": "Welcome to Curio API"}


# =============================================================================
# Development Server
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
