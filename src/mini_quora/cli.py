"""CLI entry point for Mini Quora."""

import click

from mini_quora import __version__
from mini_quora.config import get_settings
from mini_quora.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Mini Quora - share short tagged posts."""
    pass


@cli.command("serve")
@click.option("--host", "-h", default=None, help="Host to bind to (default from settings)")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to (default from settings)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, reload: bool):
    """Start the web server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    configure_logging(settings.log_level, settings.log_format)
    logger.info("server_starting", host=host, port=port, reload=reload)
    click.echo(f"Mini Quora running at http://{host}:{port}")
    uvicorn.run(
        "mini_quora.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


if __name__ == "__main__":
    cli()
