"""
Main application entry point for the Evently application.

Loads environment variables, configures logging and serves the FastAPI
application with uvicorn.
"""

import logging
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from evently.utils.logger import setup_logging
from evently.utils.config import get_settings

setup_logging()
logger = logging.getLogger(__name__)

from evently.main import app

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting Evently on {settings.HOST}:{settings.PORT} (reload={settings.RELOAD})")

    uvicorn.run(
        "app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level="info"
    )
