"""Path helpers, project discovery and dev-command detection."""

from __future__ import annotations

import os
import shlex
import shutil
from pathlib import Path

PROJECTS_DB = "~/.config/projctl/projects.json"
STATE = "~/.cache/current_project"
PROJECTS_DIR = "~/projects"

_FRONTEND_DIRS = ("apps/web", "web", "frontend", "client", "packages/web")
_BACKEND_DIRS = ("apps/api", "api", "backend", "server", "services/api", "packages/api")
_COMPOSE_FILES = ("compose.yml", "docker-compose.yml")


def expand_tilde(path: str) -> Path:
    """Replace a leading ``~`` (alone or followed by ``/``) with the home directory."""
    if path == "~":
        return Path.home()
    if path.startswith("~/"):
        return Path.home() / path[2:]
    return Path(path)


def get_projects_db() -> Path:
    """Location of the JSON file that stores named projects."""
    return expand_tilde(PROJECTS_DB)


def get_state() -> Path:
    """Location of the file that records the current project."""
    return expand_tilde(STATE)


def get_projects_dir() -> Path:
    """Directory scanned for auto-detected projects."""
    return expand_tilde(PROJECTS_DIR)


def get_current_projdir() -> Path:
    """Return the current project's directory.

    Raises FileNotFoundError if no project is set or its path is gone.
    """
    try:
        text = get_state().read_text()
    except OSError as err:
        raise FileNotFoundError("No current project set") from err
    path = Path(text.strip())
    if not path.exists():
        raise FileNotFoundError("Current project path does not exist")
    return path


def _logged(cmd: str) -> str:
    return f"mkdir -p logs && {cmd} 2>&1 | tee logs/app.log"


def detect_dev_cmd(dir: Path) -> str:
    """Detect a dev command for a directory (JS, Rust, Go, Python)."""
    dir = Path(dir)
    if (dir / "package.json").exists():
        return _logged("(pnpm run dev || npm run dev || yarn dev)")
    if (dir / "Cargo.toml").exists():
        if shutil.which("cargo-watch"):
            return _logged("cargo watch -x run")
        return _logged("cargo run")
    if (dir / "go.mod").exists():
        if shutil.which("air"):
            return _logged("air")
        return _logged("go run ./...")
    if (dir / "pyproject.toml").exists() or (dir / "requirements.txt").exists():
        if shutil.which("uv"):
            return _logged("uv run python -m app")
        return _logged("python -m app")
    shell = os.environ.get("SHELL", "sh")
    return f"echo 'No dev command detected'; {shell}"


def _first_existing(base: Path, candidates: tuple[str, ...]) -> Path | None:
    return next(
        (base / sub for sub in candidates if (base / sub).exists()),
        None,
    )


def guess_frontend_dir(proj_dir: Path) -> Path | None:
    """Return the first conventional frontend directory that exists."""
    return _first_existing(Path(proj_dir), _FRONTEND_DIRS)


def guess_backend_dir(proj_dir: Path) -> Path | None:
    """Return the first conventional backend directory that exists."""
    return _first_existing(Path(proj_dir), _BACKEND_DIRS)


def compose_file(proj_dir: Path) -> Path | None:
    """Return the project's docker compose file, if any."""
    return _first_existing(Path(proj_dir), _COMPOSE_FILES)


def get_autodetected_projdir(name: str) -> Path | None:
    """Return the directory of an auto-detected project, if it exists."""
    candidate = get_projects_dir() / name
    return candidate if candidate.is_dir() else None


def canon(path: Path) -> Path:
    """Canonical form of a path; falls back to an absolute path if it cannot resolve."""
    path = Path(path)
    try:
        return path.resolve(strict=True)
    except OSError:
        return path if path.is_absolute() else Path.cwd() / path


def same_path(a: Path, b: Path) -> bool:
    """True if both paths refer to the same canonical location."""
    return canon(a) == canon(b)


def autodetected_projects() -> list[tuple[str, Path]]:
    """Return all auto-detected projects in the projects directory, sorted by name."""
    directory = get_projects_dir()
    try:
        entries = list(directory.iterdir())
    except OSError:
        return []
    return sorted((p.name, p) for p in entries if p.is_dir())


def parse_cmd(cmd: str) -> tuple[str, list[str]]:
    """Split a shell-like command into its program and arguments."""
    try:
        parts = shlex.split(cmd)
    except ValueError:
        return cmd, []
    if not parts:
        return "", []
    return parts[0], parts[1:]