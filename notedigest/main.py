"""Run the Note Digest API under uvicorn.

Host, port, and log level come from the command line; the log level
falls back to ``log_level`` in ``configs/config.yaml``.
"""

import argparse
import logging

import uvicorn

from notedigest.utils.config import load_config
from notedigest.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Note Digest API server")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Bind port")
    parser.add_argument("--log-level", default=None, help="Override config level")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    level = args.log_level or load_config().log_level
    package_logger = setup_logging(level)

    logger.info("Serving Note Digest API on %s:%d", args.host, args.port)
    uvicorn.run(
        "notedigest.api.app:app",
        host=args.host,
        port=args.port,
        log_level=logging.getLevelName(package_logger.level).lower(),
    )


if __name__ == "__main__":
    main()
