"""
Run script for starting the web call relay server.

The provider credential is read once, before anything else. Without it the
script exits before the server binds its port.

Usage:
    python run.py [--port PORT] [--host HOST] [--log-level LEVEL]
"""

import argparse
import sys

import uvicorn

from webcall.config.logging_config import configure_logging
from webcall.config.settings import RelaySettings, load_env_file
from webcall.errors import ConfigurationError
from webcall.main import create_app

# Load .env before reading any setting
load_env_file()

logger = configure_logging()


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Start the web call relay server")
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to run the server on (default: 8080 or PORT env var)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind the server to (default: 0.0.0.0 or HOST env var)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO or LOG_LEVEL env var)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point: load settings, build the app and serve it."""
    args = parse_args(argv)

    try:
        settings = RelaySettings.from_env()
    except ConfigurationError as e:
        logger.error(f"ERROR: {e.message}")
        print("Error: RETELL_API_KEY environment variable is required", file=sys.stderr)
        sys.exit(1)

    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port

    log_level = args.log_level or settings.log_level
    configure_logging(log_level)

    app = create_app(settings)

    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    logger.info("RETELL_API_KEY loaded from environment")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
