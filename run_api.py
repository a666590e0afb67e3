"""Command-line launcher for the Personnel API.

Usage:
    python run_api.py                    # serve on PERSONNEL_API_HOST:PERSONNEL_API_PORT
    python run_api.py --port 9000        # override the port
    python run_api.py --reload --seed    # dev mode with demo employees
"""

import argparse
import os
import sys

import uvicorn

import config
from config import API_HOST, API_PORT
from logger_config import setup_logger

logger = setup_logger("run_api")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Personnel API server")
    parser.add_argument("--host", default=API_HOST, help=f"Bind address (default: {API_HOST})")
    parser.add_argument("--port", type=int, default=API_PORT, help=f"Bind port (default: {API_PORT})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--seed", action="store_true", help="Seed demo employees into an empty database")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.seed:
        # env var covers the --reload worker, which re-imports config
        os.environ["PERSONNEL_SEED_DEMO"] = "1"
        config.SEED_DEMO_DATA = True

    logger.info(f"Starting Personnel API on {args.host}:{args.port}")
    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
