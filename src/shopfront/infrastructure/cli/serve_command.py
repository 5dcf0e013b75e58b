"""CLI command that runs the HTTP API."""

from __future__ import annotations

import logging

import click
import uvicorn

from shopfront.infrastructure.bootstrap import Container
from shopfront.infrastructure.http.app import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: HOST or 127.0.0.1).")
@click.option("--port", default=None, type=int, help="Port (default: PORT or 3001).")
@click.pass_obj
def serve(container: Container, host: str | None, port: int | None) -> None:
    """Run the API server."""
    settings = container.settings
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; login and authenticated routes will fail")

    app = create_app(container=container)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )
