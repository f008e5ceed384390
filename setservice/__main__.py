"""
CLI entry point.

Usage:
    # Serve the API with uvicorn
    python -m setservice serve --host 127.0.0.1 --port 8080
"""

import argparse
import logging

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server."""
    import uvicorn

    logger.info("Starting setservice at http://%s:%d", args.host, args.port)
    uvicorn.run("setservice.main:app", host=args.host, port=args.port, reload=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="setservice — a shared string set over HTTP")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=DEFAULT_HOST, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Bind port")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
