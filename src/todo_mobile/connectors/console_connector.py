# src/todo_mobile/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

from ..cli.bootstrap import Session
from ..cli.commands import registry as command_registry
from ..cli.commands import submit_new_task
from ..cli.render import render_screen
from ..core.state import EditPhase, edit_phase

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")

Runner = Callable[[Awaitable[Any]], Any]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


async def handle_text(session: Session, text: str) -> str:
    """
    Plain (non-command) input.

    Editing: the text replaces the edit buffer (like typing in the edit box).
    Idle: the text goes into the input field and is submitted as a new task.
    """
    state = session.state
    if edit_phase(state) is EditPhase.EDITING:
        state.edit_title = text
        return render_screen(state)

    return await submit_new_task(session, text)


async def handle_line(session: Session, line: str) -> str | None:
    """One REPL step. Returns what to print, or None for nothing."""
    if not line:
        return None

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    try:
        reply = await command_registry.handle(session, line, emit=emit)
        if reply is None:
            reply = await handle_text(session, line)
    except Exception:
        logger.exception("Command handler crashed.")
        reply = "Internal error while handling a command."
    return reply


def run_console_loop(session: Session, run: Runner) -> None:
    """
    Blocking REPL on the main thread.

    `run` drives one coroutine to completion on the session's event loop
    (asyncio.Runner.run). input() stays outside the loop so Ctrl+C at the
    prompt raises KeyboardInterrupt right here.
    """
    logger.info("Console connector started (api=%s).", getattr(session.settings, "api_url", "?"))
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_screen(session.state), flush=True)

    while True:
        prompt = "edit> " if edit_phase(session.state) is EditPhase.EDITING else "> "
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = run(handle_line(session, user_input))
        except KeyboardInterrupt:
            # Ctrl+C while a request is in flight: drop that command, keep the console.
            logger.info("Command interrupted: %s", user_input)
            print()
            continue

        if reply is not None:
            print(reply, flush=True)

    logger.info("Console connector finished.")
