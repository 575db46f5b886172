"""Command line entry point: serves the Track Studio API with uvicorn."""

import argparse

import uvicorn

from track_studio.config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="track-studio",
        description="Serve the GPX import, route metrics and activity synthesis API",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level",
    )
    parser.add_argument("--reload", action="store_true", help="Restart on source changes")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the server until interrupted."""
    args = build_parser().parse_args(argv)

    print(f"Track Studio API on http://{args.host}:{args.port}/api")

    uvicorn.run(
        "track_studio.app:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
