"""
Entry point for the Users Backend
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Import the FastAPI application
from users_backend.app import app
from users_backend.config.settings import PORT

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Users Backend on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
