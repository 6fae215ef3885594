# src/todo_mobile/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import cast

from ..api.client import friendly_api_error_message
from ..core.models import FilterMode
from ..core.state import (
    EditPhase,
    cancel_edit,
    edit_phase,
    find_task,
    set_dark_mode,
    set_filter,
    start_edit,
    toggle_dark_mode,
)
from .bootstrap import Session
from .render import render_screen

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[Session, list[str]], Awaitable[str]]
CommandHandler3 = Callable[[Session, list[str], CommandEmitter | None], Awaitable[str]]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        session: Session,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return await h3(session, args, emit)

        h2 = cast(CommandHandler2, handler)
        return await h2(session, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _screen(session: Session) -> str:
    return render_screen(session.state)


def _last_failure_text(session: Session) -> str:
    last = session.failures.last
    if last is None:
        return "the server did not accept the change."
    return friendly_api_error_message(last.error)


async def submit_new_task(session: Session, text: str) -> str:
    """Create a task from `text`; on failure the text stays in the input field."""
    state = session.state
    session.failures.reset()
    before = len(state.tasks)
    await session.sync.create(state, text)
    if len(state.tasks) == before:
        return (
            f"Task was not added: {_last_failure_text(session)}\n"
            f"Input kept: {state.title!r} (use /add to retry)."
        )
    return _screen(session)


async def cmd_help(session: Session, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(session: Session, args: list[str]) -> str:
    return _screen(session)


async def cmd_refresh(session: Session, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit is not None:
        emit("Loading tasks...")
    await session.sync.fetch_all(session.state)
    return _screen(session)


async def cmd_status(session: Session, args: list[str]) -> str:
    state = session.state
    done = sum(1 for t in state.tasks if t.completed)
    return (
        "Status:\n"
        f"  API: {getattr(session.settings, 'api_url', '?')}\n"
        f"  Tasks: {len(state.tasks)} ({done} completed)\n"
        f"  Filter: {state.filter_mode.label}\n"
        f"  Dark mode: {'ON' if state.dark_mode else 'OFF'}\n"
        f"  Edit: {edit_phase(state).value}"
    )


async def cmd_add(session: Session, args: list[str]) -> str:
    """
    /add <title>  -> create a task
    /add          -> retry with the text left in the input field
    """
    state = session.state
    text = " ".join(args) if args else state.title
    if not text.strip():
        return "Nothing to add. Usage: /add <title>"
    return await submit_new_task(session, text)


async def cmd_toggle(session: Session, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle <id>"
    task = find_task(session.state, args[0])
    if task is None:
        return f"No task with id {args[0]}."
    await session.sync.toggle_task(session.state, task)
    return _screen(session)


async def cmd_delete(session: Session, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <id>"
    task = find_task(session.state, args[0])
    if task is None:
        return f"No task with id {args[0]}."
    await session.sync.delete(session.state, task.id)
    return _screen(session)


async def cmd_edit(session: Session, args: list[str]) -> str:
    if not args:
        return "Usage: /edit <id>"
    task = find_task(session.state, args[0])
    if task is None:
        return f"No task with id {args[0]}."
    start_edit(session.state, task)
    return _screen(session)


async def cmd_save(session: Session, args: list[str]) -> str:
    """
    /save          -> submit the edit buffer
    /save <title>  -> submit this title instead
    """
    state = session.state
    if edit_phase(state) is EditPhase.IDLE:
        return "Not editing anything. Use /edit <id> first."

    session.failures.reset()
    await session.sync.submit_edit(state, " ".join(args) if args else None)
    if edit_phase(state) is EditPhase.EDITING:
        return (
            f"Edit was not saved: {_last_failure_text(session)}\n"
            "Use /save to retry or /cancel to close."
        )
    return _screen(session)


async def cmd_cancel(session: Session, args: list[str]) -> str:
    if edit_phase(session.state) is EditPhase.IDLE:
        return "Not editing anything."
    cancel_edit(session.state)
    return _screen(session)


async def cmd_filter(session: Session, args: list[str]) -> str:
    """
    /filter                         -> show current filter
    /filter all|completed|incomplete -> switch the view
    """
    if not args:
        return f"Filter is {session.state.filter_mode.label}. Use /filter all|completed|incomplete."
    try:
        set_filter(session.state, args[0])
    except ValueError:
        return "Usage: /filter " + "|".join(m.value for m in FilterMode)
    return _screen(session)


async def cmd_dark(session: Session, args: list[str]) -> str:
    """
    /dark      -> toggle
    /dark on   -> enable
    /dark off  -> disable
    """
    if not args:
        toggle_dark_mode(session.state)
        return _screen(session)

    arg = args[0].lower()
    if arg in ("on", "1", "true", "yes"):
        set_dark_mode(session.state, True)
        return _screen(session)
    if arg in ("off", "0", "false", "no"):
        set_dark_mode(session.state, False)
        return _screen(session)
    return "Usage: /dark on or /dark off."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Reload tasks from the server.", aliases=["r"])
registry.register("status", cmd_status, help_text="Show API, counts, filter and mode.")
registry.register("add", cmd_add, help_text="Add a task: /add <title>.", aliases=["a"])
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <id>.", aliases=["t", "done"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm", "del"])
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <id>.", aliases=["e"])
registry.register("save", cmd_save, help_text="Submit the edit: /save [title].")
registry.register("cancel", cmd_cancel, help_text="Close the edit without saving.")
registry.register(
    "filter", cmd_filter, help_text="Filter the view: /filter all | completed | incomplete.", aliases=["f"]
)
registry.register("dark", cmd_dark, help_text="Dark mode: /dark [on|off].")
