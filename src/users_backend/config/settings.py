"""
Configuration settings for the Users Backend
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
DATABASE_URL = os.getenv("DATABASE_URL")
PORT = int(os.getenv("PORT", 8080))

# Storage backend: "postgres" or "memory"
STORAGE_POSTGRES = "postgres"
STORAGE_MEMORY = "memory"
STORAGE_BACKEND = os.getenv(
    "STORAGE_BACKEND", STORAGE_POSTGRES if DATABASE_URL else STORAGE_MEMORY
).lower()

# Connection pool tuning
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

logger.info(f"Environment: {ENV}")
logger.info(f"Storage backend: {STORAGE_BACKEND}")

# Validate storage configuration
if STORAGE_BACKEND not in (STORAGE_POSTGRES, STORAGE_MEMORY):
    raise ValueError(f"Unknown STORAGE_BACKEND: {STORAGE_BACKEND}")
if STORAGE_BACKEND == STORAGE_POSTGRES and not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is required for postgres storage")
if STORAGE_BACKEND == STORAGE_MEMORY:
    logger.warning("Using in-memory storage - data will not survive a restart")

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
]
