# tests/test_console_exit.py

from __future__ import annotations

import os
import queue
import signal
import subprocess
import sys
import threading
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")


def _start_console(tmp_path: Path) -> subprocess.Popen[str]:
    env = dict(os.environ)
    env.update(
        {
            "TODO_FETCH_ON_START": "0",
            "TODO_DATA_DIR": str(tmp_path / "data"),
            "TODO_API_URL": "http://127.0.0.1:9/tasks",
            "NO_COLOR": "1",
        }
    )
    return subprocess.Popen(
        [sys.executable, "-u", "-m", "todo_mobile.cli.main"],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        cwd=tmp_path,
        env=env,
        text=True,
    )


def _wait_for_line(proc: subprocess.Popen[str], needle: str, timeout: float) -> bool:
    lines: queue.Queue[str] = queue.Queue()

    def pump() -> None:
        assert proc.stdout is not None
        for line in proc.stdout:
            lines.put(line)

    threading.Thread(target=pump, daemon=True).start()
    while True:
        try:
            if needle in lines.get(timeout=timeout):
                return True
        except queue.Empty:
            return False


def test_ctrl_c_at_prompt_exits(tmp_path: Path) -> None:
    proc = _start_console(tmp_path)
    try:
        assert _wait_for_line(proc, "[CONSOLE]", timeout=20), "console banner never printed"

        # stdin stays open, so the console is blocked waiting for input.
        proc.send_signal(signal.SIGINT)

        assert proc.wait(timeout=10) == 0
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
        if proc.stdin is not None:
            proc.stdin.close()


def test_eof_exits(tmp_path: Path) -> None:
    proc = _start_console(tmp_path)
    try:
        assert _wait_for_line(proc, "[CONSOLE]", timeout=20)
        assert proc.stdin is not None
        proc.stdin.close()

        assert proc.wait(timeout=10) == 0
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
