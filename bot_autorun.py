"""
Auto mode for the bot: call the trigger endpoint on a fixed interval.

The service never polls by itself; this script is the external timer.

    python bot_autorun.py              # every BOT_AUTORUN_INTERVAL_SECONDS
    python bot_autorun.py --once       # single pass
"""
import argparse
import logging
import time

import httpx

from app.core.config import settings
from app.core.logging_config import setup_logging

logger = logging.getLogger("bot_autorun")

TRIGGER_PATH = "/api/bot/trigger"


def bot_headers(user_id: str = None) -> dict:
    return {"X-User-Id": user_id or settings.BOT_USER_ID, "X-User-Role": "bot"}


def run_once(client: httpx.Client) -> dict:
    """Trigger one pass and return the decoded response body"""
    response = client.post(TRIGGER_PATH, headers=bot_headers())
    response.raise_for_status()
    body = response.json()
    logger.info("Bot pass advanced %s application(s)", body.get("processedApplications", 0))
    return body


def run_forever(client: httpx.Client, interval: float, max_runs: int = None, sleep=time.sleep) -> int:
    """Trigger passes until interrupted (or ``max_runs`` reached); returns passes attempted"""
    runs = 0
    while max_runs is None or runs < max_runs:
        runs += 1
        try:
            run_once(client)
        except httpx.HTTPError as exc:
            # Keep ticking; the next interval retries
            logger.error("Bot pass failed: %s", exc)
        if max_runs is None or runs < max_runs:
            sleep(interval)
    return runs


def main() -> None:
    parser = argparse.ArgumentParser(description="Periodically trigger bot automation passes")
    parser.add_argument("--base-url", default=settings.API_BASE_URL)
    parser.add_argument("--interval", type=float, default=settings.BOT_AUTORUN_INTERVAL_SECONDS)
    parser.add_argument("--once", action="store_true", help="run a single pass and exit")
    args = parser.parse_args()

    setup_logging()
    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        if args.once:
            run_once(client)
            return
        logger.info("Auto mode enabled (%ss intervals)", args.interval)
        try:
            run_forever(client, args.interval)
        except KeyboardInterrupt:
            logger.info("Auto mode disabled")


if __name__ == "__main__":
    main()
