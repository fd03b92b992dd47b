"""Server module entry point for running with python -m server."""

import os

import uvicorn
from loguru import logger

# Configure loguru before uvicorn starts so its loggers are intercepted
from daemonmd.utils.logging_config import configure_logging

configure_logging()

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.bind(host=host, port=port).info("Starting daemonmd server")

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Disable uvicorn's default logging config
    )
