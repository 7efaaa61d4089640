"""Unified entry point for the User Cluster API.

Starts the API as a set of identical worker processes that share one
listening port.  Every worker imports ``user_cluster_api.app.main:app``
on its own and therefore owns an independent, freshly seeded user
store: a write handled by one worker is never visible to the others.
Uvicorn's process supervisor replaces workers that die.

Host, port, number of workers and log level default to the values in
``user_cluster_api.app.core.config`` and can be overridden on the
command line.

Usage:
    python run.py --port 3000 --workers 4
"""
import argparse
import logging
from typing import List, Optional

import uvicorn

from user_cluster_api.app.core.config import settings
from user_cluster_api.app.core.logging_config import setup_logging

APP_IMPORT_STRING = "user_cluster_api.app.main:app"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the User Cluster API on a shared port.")
    ap.add_argument("--host", default=settings.host, help="Address every worker binds to")
    ap.add_argument("--port", type=int, default=settings.port, help="TCP port shared by all workers")
    ap.add_argument("--workers", type=int, default=settings.workers, help="Number of worker processes")
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level, e.g. INFO or DEBUG")
    args = ap.parse_args(argv)
    if args.workers < 1:
        ap.error("--workers must be at least 1")
    return args


def run_single(args: argparse.Namespace) -> None:
    """Serve the application in the current process."""
    config = uvicorn.Config(app=APP_IMPORT_STRING, host=args.host, port=args.port, log_level=args.log_level.lower())
    server = uvicorn.Server(config)
    server.run()


def run_cluster(args: argparse.Namespace) -> None:
    """Fork ``args.workers`` processes serving the same socket."""
    uvicorn.run(
        APP_IMPORT_STRING,
        host=args.host,
        port=args.port,
        workers=args.workers,
        log_level=args.log_level.lower(),
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, settings.log_file or None, settings.log_format)
    logging.getLogger(__name__).info(
        "Starting %s worker(s) on %s:%s", args.workers, args.host, args.port
    )
    if args.workers == 1:
        run_single(args)
    else:
        run_cluster(args)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
