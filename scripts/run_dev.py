"""Development entry point."""

from __future__ import annotations

import argparse
import os

from app import create_app


def _resolve_port(value: str | None) -> int:
    value = value or os.getenv("CALC_SERVER_PORT") or os.getenv("PORT") or "5001"
    try:
        return int(value)
    except ValueError as exc:
        raise SystemExit(
            f"Invalid port '{value}'. Set CALC_SERVER_PORT to a number."
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Calc Server development server")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", default=None, help="Port (defaults to CALC_SERVER_PORT or 5001)")
    parser.add_argument("--config", default=None, help="Path to an alternative config.yml")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.config:
        os.environ["CALC_SERVER_CONFIG"] = args.config
    app = create_app()
    app.run(host=args.host, port=_resolve_port(args.port), debug=False)


if __name__ == "__main__":
    main()
