# src/todo_mobile/cli/render.py

"""Text rendering of the task screen (header, filter bar, list, edit panel)."""

from __future__ import annotations

from ..core.models import FilterMode, Task
from ..core.state import AppState, EditPhase, edit_phase, visible_tasks
from .theme import BOLD, DIM, STRIKE, color, palette_for

ADD_PLACEHOLDER = "Add a cute task 💕"


def render_task(task: Task, *, dark_mode: bool = False, colors: bool | None = None) -> str:
    pal = palette_for(dark_mode)
    key = color(f"[{task.key}]", pal.accent, BOLD, enabled=colors)
    if task.completed:
        mark = color("✓", pal.done, enabled=colors)
        title = color(task.title, pal.done, STRIKE, enabled=colors)
    else:
        mark = color("○", pal.accent, enabled=colors)
        title = color(task.title, pal.text, enabled=colors)
    return f"{key} {mark} {title}"


def render_filter_bar(active: FilterMode, *, dark_mode: bool = False, colors: bool | None = None) -> str:
    pal = palette_for(dark_mode)
    parts = []
    for mode in FilterMode:
        if mode is active:
            parts.append(color(f"[{mode.label}]", pal.accent, BOLD, enabled=colors))
        else:
            parts.append(color(f" {mode.label} ", pal.muted, enabled=colors))
    return "  ".join(parts)


def render_screen(state: AppState, *, colors: bool | None = None) -> str:
    pal = palette_for(state.dark_mode)
    mode = "🌙 dark" if state.dark_mode else "☀️ light"
    lines = [
        color("📝 My Tasks", pal.title, BOLD, enabled=colors) + "  " + color(mode, pal.muted, enabled=colors),
        render_filter_bar(state.filter_mode, dark_mode=state.dark_mode, colors=colors),
        "",
    ]

    shown = visible_tasks(state)
    if shown:
        lines.extend(render_task(t, dark_mode=state.dark_mode, colors=colors) for t in shown)
    elif state.tasks:
        lines.append(color(f"(no {state.filter_mode.value} tasks)", pal.muted, DIM, enabled=colors))
    else:
        lines.append(color("(no tasks yet)", pal.muted, DIM, enabled=colors))

    lines.append("")
    if state.title:
        lines.append(color(f"Input: {state.title}", pal.text, enabled=colors))
    else:
        lines.append(color(ADD_PLACEHOLDER, pal.muted, enabled=colors))

    if edit_phase(state) is EditPhase.EDITING and state.editing_task is not None:
        lines.append(render_edit_panel(state, colors=colors))

    return "\n".join(lines)


def render_edit_panel(state: AppState, *, colors: bool | None = None) -> str:
    pal = palette_for(state.dark_mode)
    task = state.editing_task
    if task is None:
        return ""
    return "\n".join(
        [
            color(f"Editing [{task.key}]: {task.title}", pal.accent, BOLD, enabled=colors),
            color(f"  New title: {state.edit_title}", pal.text, enabled=colors),
            color("  Type text to change it, /save to submit, /cancel to close.", pal.muted, enabled=colors),
        ]
    )
