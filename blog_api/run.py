"""Start the Blog API with uvicorn.

Host, port and log level come from the environment (see
``blog_api.app.core.config``) and can be overridden on the command
line::

    blog-api --port 9000
    python -m blog_api.run --host 127.0.0.1
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from uvicorn import Config, Server

from blog_api.app.core.config import settings
from blog_api.app.main import app

logger = logging.getLogger(__name__)

FATAL_MESSAGE = "Service will be shut down because an error occurred"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Blog API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        help="uvicorn log level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def build_server(args: argparse.Namespace) -> Server:
    config = Config(app=app, host=args.host, port=args.port, reload=False, log_level=args.log_level)
    return Server(config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until it is stopped.  Returns the exit status.

    A server that fails to start (e.g. the port is already bound) is
    logged as fatal and yields ``1``.
    """
    args = parse_args(argv)
    server = build_server(args)
    logger.info("Serving Blog API on %s:%d", args.host, args.port)
    try:
        server.run()
    except KeyboardInterrupt:
        return 0
    except SystemExit as e:
        # uvicorn exits the process itself when binding or startup fails.
        if e.code in (None, 0):
            return 0
        logger.critical("%s: server exited with status %s", FATAL_MESSAGE, e.code)
        return 1
    except Exception:
        logger.critical(FATAL_MESSAGE, exc_info=True)
        return 1
    if not server.started:
        logger.critical("%s: server never started", FATAL_MESSAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
