#!/usr/bin/env python
"""
Launch the apppath HTTP backend with uvicorn.

Command line options override the server and logging sections of
config/apppath.yaml.

Usage:
    python run_server.py [--config PATH] [--host HOST] [--port PORT]
                         [--log-level LEVEL] [--reload]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# backend/ holds the apppath package
sys.path.insert(0, str(Path(__file__).parent.parent))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run_server",
        description="Serve the apppath path and file API"
    )
    parser.add_argument("--config", metavar="PATH", help="apppath.yaml to load")
    parser.add_argument("--host", help="bind address (config: server.host)")
    parser.add_argument("--port", type=int, help="bind port (config: server.port)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="log level (config: logging.level)"
    )
    parser.add_argument("--reload", action="store_true", help="restart on code changes")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    from apppath.config import get_config, reload_config
    from apppath.utils.logging_utils import get_logger, setup_logging

    config = reload_config(args.config) if args.config else get_config()
    if args.log_level:
        config.logging.level = args.log_level
    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port

    setup_logging(level=config.logging.level, log_file=config.logging.file)
    logger = get_logger("server")
    logger.info("Serving on http://%s:%d", config.server.host, config.server.port)
    logger.info("app: -> %s", config.directories.installation_dir)
    logger.info("app-storage: -> %s", config.directories.storage_dir)

    import uvicorn
    uvicorn.run(
        "apppath.api.server:app",
        host=config.server.host,
        port=config.server.port,
        reload=args.reload,
        log_level=config.logging.level.lower()
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
