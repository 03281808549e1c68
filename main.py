"""
Start script for the Steuernummer API (FastAPI via uvicorn).

Usage:
    uv run python main.py
    uv run python main.py --finanzamt-file bufa.txt --port 8080 --reload
"""

from __future__ import annotations

import argparse
import os

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Start the steuernummer API")
    parser.add_argument(
        "--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port", type=int, default=8000, help="Bind port (default: 8000)"
    )
    parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload on code changes"
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Number of worker processes (default: 1)"
    )
    parser.add_argument(
        "--finanzamt-file",
        help="File with known Bundesfinanzamtnummern, one per line",
    )
    parser.add_argument(
        "--legacy-separators",
        action="store_true",
        help='Also accept "-" and "_" as separators',
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept Länder-scheme numbers without a Bundesland by default",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    args = parser.parse_args()

    # The app reads its settings from the environment, also in reload/worker processes
    if args.finanzamt_file:
        os.environ["STEUERNUMMER_FINANZAMT_FILE"] = os.path.abspath(args.finanzamt_file)
    if args.legacy_separators:
        os.environ["STEUERNUMMER_LEGACY_SEPARATORS"] = "1"
    if args.lenient:
        os.environ["STEUERNUMMER_LENIENT"] = "1"
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
    )


if __name__ == "__main__":
    main()
