from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

import structlog

from .logging_config import setup_logging
from .models import CheckStats
from .output import OutputHandler, StdoutHandler
from .photo_url import PHOTO_DOMAINS, is_allowed_photo_url

log = structlog.get_logger()


def run(urls: Iterable[str], handlers: list[OutputHandler]) -> CheckStats:
    stats = CheckStats()

    for url in urls:
        allowed = is_allowed_photo_url(url)
        stats.total += 1
        if allowed:
            stats.allowed += 1
        else:
            stats.rejected += 1
        for h in handlers:
            h.emit_result(url, allowed)

    for h in handlers:
        h.emit_summary(stats)

    log.info("check_complete", **stats.model_dump())
    return stats


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vk-photo-guard",
        description="Check photo URLs against the trusted photo-host allow-list.",
    )
    parser.add_argument("urls", nargs="*", help="URLs to check (read from stdin if omitted)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging()
    log.info("starting_vk_photo_guard", domains=len(PHOTO_DOMAINS))

    urls = args.urls or [line.strip() for line in sys.stdin if line.strip()]
    stats = run(urls, [StdoutHandler()])
    return 1 if stats.rejected else 0


if __name__ == "__main__":
    sys.exit(main())
