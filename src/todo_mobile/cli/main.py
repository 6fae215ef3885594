# src/todo_mobile/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Session, loads the task list once (like the
mobile screen does on mount), then runs the console REPL until /exit.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import Session, create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _shutdown(session: Session) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        await session.aclose()
    except Exception:
        logger.debug("HTTP client close failed.", exc_info=True)


def run(session: Session) -> None:
    """
    Drive the session on one event loop.

    asyncio.Runner keeps the loop (and the httpx client bound to it) alive
    between commands while the console blocks in input() on the main thread.
    """
    with asyncio.Runner() as runner:
        try:
            if getattr(session.settings, "fetch_on_start", True):
                runner.run(session.sync.fetch_all(session.state))
            run_console_loop(session, runner.run)
        finally:
            runner.run(_shutdown(session))


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s (api=%s)...", settings.app_name, settings.api_url)
    logger.debug("Logging to %s", log_file)

    session = create_session(settings=settings)
    try:
        run(session)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    logger.info("Bye.")


if __name__ == "__main__":
    main()
