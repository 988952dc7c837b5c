"""
Command-line entry point: `python -m client`.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from rich.console import Console

from . import api, view


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Posts terminal client")
    parser.add_argument(
        "--base-url",
        type=str,
        default=api.base_url_from_env(),
        help="Posts API root (default: $POSTS_API_BASE_URL or %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=api.timeout_from_env(),
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=(os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO"),
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console()
    posts_api = api.PostsApi(args.base_url, timeout_s=args.timeout)
    board = view.build_board(posts_api, console)
    try:
        asyncio.run(view.run(board, console=console))
    except (KeyboardInterrupt, EOFError):
        console.print()


if __name__ == "__main__":
    main()
