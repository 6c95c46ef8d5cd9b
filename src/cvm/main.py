"""Entry-point for launching the CLI application."""
from __future__ import annotations

import logging

from .presentation.cli.app import main as cli_main
from .presentation.cli.render import debug_enabled

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main() -> None:
    """Configure logging and run the CLI presentation layer."""
    logging.basicConfig(level=logging.DEBUG if debug_enabled() else logging.WARNING, format=LOG_FORMAT)
    cli_main()


if __name__ == "__main__":
    main()
