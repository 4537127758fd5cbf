"""Run the orgtree HTTP server with ``python -m server``."""

import os

import uvicorn

from orgtree.utils.logging_config import get_logger
from server.server_config import configure_server_logging


def run() -> None:
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    configure_server_logging()
    get_logger("server").info("Starting orgtree server", host=host, port=port, reload=reload)

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        # Keep the handlers installed above; uvicorn's dictConfig would replace them.
        log_config=None,
    )


if __name__ == "__main__":
    run()
