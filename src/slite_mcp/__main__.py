"""CLI entrypoint."""

from __future__ import annotations

import asyncio
import sys

from loguru import logger

from .logging_config import configure_logging
from .mcp_server import serve
from .settings import check_startup


def main() -> None:
    configure_logging()
    check = check_startup()
    if check.settings is None:
        logger.error("ERROR: {}", check.error)
        sys.exit(1)

    configure_logging(check.settings.log_level)
    try:
        asyncio.run(serve(check.settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
