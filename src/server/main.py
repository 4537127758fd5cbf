"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import parse
from server.server_config import configure_server_logging

# Runs in every process that imports the app, including uvicorn reload workers.
configure_server_logging()

app = FastAPI(
    title="orgtree",
    description="Parse outline documents into heading trees.",
)
app.include_router(parse.router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Report that the server is up."""
    return {"status": "ok"}
