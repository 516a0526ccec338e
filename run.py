#!/usr/bin/env python3
"""
Startup script for the Roktokona blood donor API
"""
import uvicorn
import sys
from roktokona.core.config import settings
from roktokona.core.logging import logger
from roktokona.database.database import database_location


def main():
    """Start the FastAPI application."""

    logger.info(f"Starting {settings.APP_NAME} Server")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug Mode: {settings.DEBUG}")

    config = {
        "app": "roktokona.main:app",
        "host": settings.HOST,
        "port": settings.PORT,
        "reload": settings.DEBUG,
        "log_level": settings.LOG_LEVEL.lower(),
        "access_log": True,
        "use_colors": settings.DEBUG,
    }

    logger.info(f"Server: http://localhost:{settings.PORT}")
    logger.info(f"API available at: http://localhost:{settings.PORT}/api")
    logger.info(f"Database location: {database_location(settings.DATABASE_URL)}")

    try:
        uvicorn.run(**config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
