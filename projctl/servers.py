"""Set up a tmux session with windows for running a project's servers."""

from __future__ import annotations

from pathlib import Path

from projctl.tmux import (
    Tmux,
    attach_or_switch,
    ensure_server,
    ensure_windows,
    send_to_target_sh,
    setup_docker_layout,
)
from projctl.utils import compose_file, detect_dev_cmd, guess_backend_dir, guess_frontend_dir

TMUX_LABEL = "projctl"

_EXTRA_WINDOWS = ("backend", "docker", "logs", "scratch")
_ALL_WINDOWS = ("frontend", *_EXTRA_WINDOWS)

_DOCKER_PS_CMD = r'''watch -n 1 "docker ps --format 'table {{.Names}}\t{{.Image}}\t{{.Status}}'"'''
_POSTGRES_CMD = r"docker ps --format '{{.Names}} | grep -Ei 'postgres|pg' | head -n1 | xargs -r docker logs -f || echo 'No postgres'"
_REDIS_CMD = r"docker ps --format '{{.Names}}' | grep -Ei '^redis' | head -n1 | xargs -r docker logs -f || echo 'No redis'"


def setup_servers(proj_dir: Path, refresh: bool, reset: bool, kill: bool) -> None:
    """Create, refresh, reset, kill or attach the project's servers session."""
    proj_dir = Path(proj_dir)
    if not proj_dir.name:
        raise ValueError(f"project dir has no name: {proj_dir}")
    session = f"{proj_dir.name}-servers"

    tmux = Tmux(TMUX_LABEL)
    ensure_server(tmux)

    has_session = tmux.ok(["has-session", "-t", session])

    if kill:
        if has_session:
            print(f"Killing session '{session}'...")
            tmux.run(["kill-session", "-t", session])
        else:
            print(f"No session '{session}' to kill.")
        return

    if reset and has_session:
        print(f"Resetting session '{session}'...")
        tmux.run(["kill-session", "-t", session])
        has_session = False

    if not has_session:
        print(f"Creating session '{session}'...")
        tmux.run(
            ["new-session", "-d", "-s", session, "-n", "frontend", "-c", str(proj_dir)]
        )
        _seed_session(tmux, session, proj_dir, _EXTRA_WINDOWS)
        return

    if refresh:
        print(f"Refreshing session '{session}' (reseed layout + commands).")
        _seed_session(tmux, session, proj_dir, _ALL_WINDOWS)
        return

    print(f"Session '{session}' exists - attaching.")
    attach_or_switch(tmux, session)


def _seed_session(tmux: Tmux, session: str, proj_dir: Path, windows: tuple[str, ...]) -> None:
    for name in windows:
        ensure_windows(tmux, session, name, proj_dir)
    panes = setup_docker_layout(tmux, session)
    _seed_frontend(tmux, session, proj_dir)
    _seed_backend(tmux, session, proj_dir)
    _seed_docker(tmux, proj_dir, panes)
    attach_or_switch(tmux, session)


def _seed_frontend(tmux: Tmux, session: str, proj_dir: Path) -> None:
    front_dir = guess_frontend_dir(proj_dir) or proj_dir
    send_to_target_sh(tmux, f"{session}:frontend", front_dir, detect_dev_cmd(front_dir))


def _seed_backend(tmux: Tmux, session: str, proj_dir: Path) -> None:
    target = f"{session}:backend"
    back_dir = guess_backend_dir(proj_dir)
    if back_dir is not None:
        send_to_target_sh(tmux, target, back_dir, detect_dev_cmd(back_dir))
    else:
        send_to_target_sh(tmux, target, proj_dir, "echo 'No backend dir found'; exec $SHELL")


def _seed_docker(tmux: Tmux, proj_dir: Path, panes: list[str]) -> None:
    compose = compose_file(proj_dir)
    if compose is not None:
        cmd = (
            f"docker compose -f {compose} up -d && "
            f"watch -n 1 'docker compose -f {compose} ps'"
        )
    else:
        cmd = _DOCKER_PS_CMD
    send_to_target_sh(tmux, panes[0], proj_dir, cmd)
    send_to_target_sh(tmux, panes[1], proj_dir, _POSTGRES_CMD)
    send_to_target_sh(tmux, panes[2], proj_dir, _REDIS_CMD)
    send_to_target_sh(tmux, panes[3], proj_dir, "exec $SHELL")