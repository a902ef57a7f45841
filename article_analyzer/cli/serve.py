# article_analyzer/cli/serve.py
"""
CLI for running the HTTP API under uvicorn.

Usage:
    python -m article_analyzer.cli.serve
    python -m article_analyzer.cli.serve --host 0.0.0.0 --port 8080 --workers 2
"""

import argparse
import sys

import uvicorn

from article_analyzer.config import get_settings

APP_PATH = "article_analyzer.main:app"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the Article Analyzer API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes (default: 1)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")

    args = parser.parse_args(argv)
    settings = get_settings()

    uvicorn.run(
        APP_PATH,
        host=args.host,
        port=args.port,
        workers=None if args.reload else args.workers,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
