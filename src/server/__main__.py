"""Server module entry point for running with python -m server."""

import os

import uvicorn

from norgrefile.config import NORGREFILE_WORKSPACE
from norgrefile.utils.logging_config import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

if __name__ == "__main__":
    # Get configuration from environment variables
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Starting norgrefile server",
        extra={
            "host": host,
            "port": port,
            "workspace": str(NORGREFILE_WORKSPACE),
        },
    )

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Disable uvicorn's default logging config
    )
