"""
Users Backend API Server
Core functionality: CRUD over the User entity
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_backend.config.settings import ALLOWED_ORIGINS, STORAGE_BACKEND, STORAGE_POSTGRES
from users_backend.database.connection import init_database, close_database
from users_backend.api.routes import health, users
from users_backend.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    if STORAGE_BACKEND == STORAGE_POSTGRES:
        await init_database()
    yield
    if STORAGE_BACKEND == STORAGE_POSTGRES:
        await close_database()

def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, error handlers and routes"""
    app = FastAPI(
        title="Users Backend",
        description="Backend API for creating, reading, updating and deleting users",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/users", tags=["Users"])

    return app

# FastAPI app instance is exported for use by uvicorn
app = create_app()
