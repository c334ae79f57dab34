#!/usr/bin/env python
from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace

from saturn.application import ConsoleDisplay, build_orchestrator
from saturn.core.config import load_settings
from saturn.core.logging import configure_logging
from saturn.infrastructure import TeamsApiClient

logger = logging.getLogger("saturn.scripts.fetch_team_data")


async def fetch(args: argparse.Namespace) -> int:
    settings = load_settings()
    if args.base_url:
        settings = replace(settings, api_base_url=args.base_url.rstrip("/"))
    if args.delay is not None:
        settings = replace(settings, poll_delay_seconds=max(0.0, args.delay))
    configure_logging(args.log_level or settings.log_level, args.log_file or settings.log_file)
    logger.info("Application started.")

    api = TeamsApiClient(settings.api_base_url, timeout=settings.http_timeout_seconds)
    try:
        records = await build_orchestrator(api, settings).run(ConsoleDisplay())
    finally:
        await api.aclose()
    return 0 if records is not None else 1


def main() -> None:
    parser = argparse.ArgumentParser(description="Enqueue all teams, wait for processing and print the merged results")
    parser.add_argument("--base-url", help="team processing service URL, e.g. http://localhost:5124")
    parser.add_argument("--delay", type=float, help="seconds between poll attempts")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    parser.add_argument("--log-file", help="also write logs to this file")
    args = parser.parse_args()

    raise SystemExit(asyncio.run(fetch(args)))


if __name__ == "__main__":
    main()
