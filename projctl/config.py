"""Configuration loading and precedence resolution."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from projctl.utils import expand_tilde


@dataclass
class FileConfig:
    """Settings read from the configuration file; unset values are None."""

    editor: str | None = None
    git_ui: str | None = None


@dataclass(frozen=True)
class ResolvedConfig:
    """Final settings after merging command line, file and defaults."""

    editor: str
    git_ui: str

    @classmethod
    def default_setting(cls) -> ResolvedConfig:
        return cls(editor="nvim", git_ui="lazygit")

    @classmethod
    def resolve(cls, editor: str | None, git_ui: str | None, file: FileConfig) -> ResolvedConfig:
        """Merge with precedence: command line > file > defaults."""
        defaults = cls.default_setting()

        def pick(*values: str | None) -> str:
            return next(v for v in values if v is not None)

        return cls(
            editor=pick(editor, file.editor, defaults.editor),
            git_ui=pick(git_ui, file.git_ui, defaults.git_ui),
        )


def default_config_path() -> Path:
    return expand_tilde("~/.config/projctl/config.toml")


def load_config(path: Path) -> FileConfig:
    """Load a FileConfig from a TOML file; a missing file yields empty settings."""
    path = Path(path)
    if not path.exists():
        return FileConfig()
    try:
        text = path.read_text()
    except OSError as err:
        raise OSError(f"reading {path}: {err}") from err
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        raise ValueError(f"parsing {path}: {err}") from err
    values = {}
    for key in ("editor", "git_ui"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"parsing {path}: '{key}' must be a string")
        values[key] = value
    return FileConfig(**values)