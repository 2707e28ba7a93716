"""Thin wrapper around a dedicated tmux server and window/pane helpers."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable
from pathlib import Path

_PANE_COUNT = 4


class TmuxError(RuntimeError):
    """A tmux command exited unsuccessfully."""


class Tmux:
    """Runs tmux commands against a server selected by socket label."""

    def __init__(self, label: str) -> None:
        self.label = label

    def _command(self, args: Iterable[str]) -> list[str]:
        # A dedicated server avoids collisions with the user's own sessions.
        return ["tmux", "-L", self.label, *args]

    def run(self, args: Iterable[str]) -> None:
        """Run a tmux command, raising TmuxError if it fails."""
        result = subprocess.run(self._command(args))
        if result.returncode != 0:
            raise TmuxError(f"tmux exited with code {result.returncode}")

    def out(self, args: Iterable[str]) -> str:
        """Run a tmux command and return its trimmed standard output."""
        result = subprocess.run(self._command(args), capture_output=True)
        stdout = result.stdout.decode(errors="replace")
        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace")
            raise TmuxError(
                f"tmux command failed (code {result.returncode})\n"
                f"stdout:\n{stdout}\nstderr:\n{stderr}"
            )
        return stdout.strip()

    def ok(self, args: Iterable[str]) -> bool:
        """Run a tmux command silently and report whether it succeeded."""
        result = subprocess.run(
            self._command(args),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        return result.returncode == 0


def ensure_server(tmux: Tmux) -> None:
    try:
        tmux.run(["start-server"])
    except TmuxError as err:
        raise TmuxError(f"starting tmux server: {err}") from err


def window_exists(tmux: Tmux, session: str, name: str) -> bool:
    out = tmux.out(["list-windows", "-t", session, "-F", "#{window_name}"])
    return name in out.splitlines()


def ensure_windows(tmux: Tmux, session: str, name: str, cwd: Path) -> None:
    """Create the named window in the session unless it already exists."""
    if not window_exists(tmux, session, name):
        tmux.run(["new-window", "-t", session, "-n", name, "-c", str(cwd)])


def _parse_pane_line(line: str) -> tuple[int, str] | None:
    index, sep, pane_id = line.partition(":")
    if not sep or not index.isdecimal():
        return None
    return int(index), pane_id


def setup_docker_layout(tmux: Tmux, session: str) -> list[str]:
    """Split the docker window into four panes and return their ids by index."""
    target = f"{session}:docker"
    try:
        tmux.run(["select-window", "-t", target])
    except (TmuxError, OSError):
        pass
    tmux.run(["kill-pane", "-a", "-t", target])
    tmux.run(["select-layout", "-t", target, "tiled"])
    tmux.run(["split-window", "-h", "-t", target])
    tmux.run(["split-window", "-v", "-t", f"{target}.0"])
    tmux.run(["split-window", "-v", "-t", f"{target}.1"])
    out = tmux.out(["list-panes", "-t", target, "-F", "#{pane_index}:#{pane_id}"])

    panes = [""] * _PANE_COUNT
    for line in out.splitlines():
        parsed = _parse_pane_line(line)
        if parsed is not None and parsed[0] < _PANE_COUNT:
            index, pane_id = parsed
            panes[index] = pane_id
    return panes


def shell_escape(path: Path) -> str:
    """Quote a path for a POSIX shell using single quotes."""
    text = str(path).replace("'", "'\\''")
    return f"'{text}'"


def send_to_target_sh(tmux: Tmux, target: str, cwd: Path, cmd: str) -> None:
    """Type a command into a pane after changing to a directory and clearing it."""
    line = f"cd {shell_escape(cwd)} && clear && {cmd}"
    tmux.run(["send-keys", "-t", target, line, "C-m"])


def attach_or_switch(tmux: Tmux, session: str) -> None:
    """Switch client when already inside tmux, otherwise attach."""
    if "TMUX" in os.environ:
        tmux.run(["switch-client", "-t", session])
    else:
        tmux.run(["attach-session", "-t", session])