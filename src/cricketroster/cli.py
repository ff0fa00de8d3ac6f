"""Command-line entry point that serves the roster API."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import uvicorn

from cricketroster.api import create_app
from cricketroster.config import load_settings
from cricketroster.ingest import load_records_from_csv
from cricketroster.roster import RosterManager


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Serve the in-memory cricket roster over HTTP")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        help="Logging level",
    )
    parser.add_argument(
        "--seed",
        type=Path,
        default=None,
        help="Optional CSV (id,name,role,matches,stat) pushed onto the roster in file order",
    )
    return parser.parse_args(argv)


def build_manager(seed: Path | None) -> RosterManager:
    if seed is None:
        return RosterManager()
    return RosterManager(load_records_from_csv(seed))


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    manager = build_manager(args.seed)
    if args.seed:
        print(f"Seeded {manager.size()} players from {args.seed}")

    app = create_app(manager)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
