"""Storage of named projects in a JSON database."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from projctl.utils import get_projects_db


@dataclass
class Projects:
    """The current project and a mapping of project names to paths."""

    current: str | None = None
    projects: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flat form: ``current`` followed by one key per project."""
        return {"current": self.current, **self.projects}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Projects:
        if not isinstance(data, dict):
            raise ValueError("projects database must be a JSON object")
        entries = dict(data)
        current = entries.pop("current", None)
        if current is not None and not isinstance(current, str):
            raise ValueError("'current' must be a string or null")
        for name, path in entries.items():
            if not isinstance(path, str):
                raise ValueError(f"path of project '{name}' must be a string")
        return cls(current=current, projects=entries)


def _write(projects: Projects, path: Path) -> None:
    path.write_text(json.dumps(projects.to_dict(), indent=2))


def ensure_projects_db() -> None:
    """Create the projects database (and its directory) if it does not exist."""
    db_path = get_projects_db()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    if not db_path.exists():
        _write(Projects(), db_path)


def load_projects() -> Projects:
    return Projects.from_dict(json.loads(get_projects_db().read_text()))


def save_projects(projects: Projects) -> None:
    _write(projects, get_projects_db())


def get_projdir(name: str) -> Path | None:
    """Return the stored path of a named project, or None if unknown."""
    path = load_projects().projects.get(name)
    return Path(path) if path is not None else None