"""CLI command to start the twilight API server."""

import logging
import sys

import click
import uvicorn

from ..api import TwilightRestAPI
from ..config import load_config
from ..errors import ConfigError
from ..runtime.clock import Clock


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Configuration file path",
)
@click.option(
    "--host",
    help="Host to bind to (default: from configuration)",
)
@click.option(
    "--port",
    type=int,
    help="Port to bind to (default: from configuration)",
)
def main(config, host, port):
    """Start the twilight API server.

    Examples:
        # Start with default settings
        twilightcalc-serve

        # Serve a default location from a configuration file
        twilightcalc-serve --config twilight.yaml --port 9000
    """
    try:
        cfg = load_config(config)
    except ConfigError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(2)

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    host = host or cfg.server.host
    port = port or cfg.server.port

    api = TwilightRestAPI(cfg, Clock())
    app = api.get_app()

    click.echo(f"Starting API server on http://{host}:{port}")
    click.echo(f"   Twilight:      http://{host}:{port}/api/twilight")
    click.echo(f"   Health Check:  http://{host}:{port}/health")

    try:
        uvicorn.run(
            app,
            host=host,
            port=port,
            log_level=cfg.log_level.lower(),
        )
    except KeyboardInterrupt:
        click.echo("\nShutting down...")


if __name__ == "__main__":
    main()
