"""FastAPI application exposing catalog operations as agent tools."""

from typing import Optional

import uvicorn
from fastapi import FastAPI

from .. import __version__
from ..config import config
from ..logging_config import setup_logging
from .routes import router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="xcstrings-crud tools",
        description="Tool-calling interface for .xcstrings localization catalogs",
        version=__version__,
    )
    app.include_router(router)
    return app


app = create_app()


def run_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    uvicorn.run(
        app,
        host=host or config.tools_host,
        port=port or config.tools_port,
        log_level=config.log_level.lower(),
    )


def main():
    """Entry point for the xcstrings-tools command."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the xcstrings tool server")
    parser.add_argument("--host", default=config.tools_host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.tools_port, help="Port to bind to")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")

    args = parser.parse_args()

    setup_logging(args.log_level)
    run_server(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
