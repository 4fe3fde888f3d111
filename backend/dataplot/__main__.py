"""Command line entry point: ``python -m dataplot [-c FILE] [-l ADDR]``."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import uvicorn

from dataplot.application import create_app
from dataplot.config import (
    DEFAULT_CONFIG_FILE,
    EXIT_CANT_LISTEN,
    EXIT_SUCCESS,
    load_settings,
    parse_address,
)
from dataplot.errors import ConfigError
from dataplot.utils.logging import configure_logging, get_logger

LOGGER = get_logger("dataplot.cli")


def _parse_command_line(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dataplot",
        description="Serve linear regressions of submitted data series.",
    )
    parser.add_argument(
        "-c",
        dest="config",
        default=None,
        help=f"Config file name (default: $DATAPLOT_CONFIG or {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "-l",
        dest="address",
        default=None,
        help="Address and port to listen on (ex. 127.0.0.1:1234), overrides the config file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_command_line(argv)

    try:
        settings = load_settings(args.config, address_override=args.address)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return exc.exit_code

    configure_logging(settings.log_level)
    print(settings.address)
    print(settings.custom_log)

    host, port = parse_address(settings.address)
    app = create_app(settings)
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level=settings.log_level.lower()))
    try:
        server.run()
    except (OSError, SystemExit) as exc:
        LOGGER.error("Serving on %s failed: %s", settings.address, exc)
        return EXIT_CANT_LISTEN
    if not server.started:
        LOGGER.error("Serving on %s failed: server did not start", settings.address)
        return EXIT_CANT_LISTEN
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
