# projctl

A small library for keeping track of the projects you work on and for
bringing up a standard tmux workspace for each of them.

It works with these locations:

- a project registry in `~/.config/projctl/projects.json`, mapping names to
  paths and remembering which project is current;
- the path of the current project in `~/.cache/current_project`;
- optional settings in `~/.config/projctl/config.toml`.

Any directory directly under `~/projects` is treated as an auto-detected
project.

## Installation

```
pip install .
```

Python 3.11 or later is required. There are no runtime dependencies beyond
the standard library; `tmux` must be on `PATH` to use the server sessions.

## Configuration (`projctl.config`)

`config.toml` may set the editor and the git UI:

```toml
editor = "nvim"
git_ui = "lazygit"
```

`load_config(path)` returns a `FileConfig` whose unset values are `None`. A
missing file yields empty settings. A file that is not valid TOML, or whose
`editor` or `git_ui` is not a string, raises `ValueError`.

`ResolvedConfig.resolve(editor, git_ui, file)` merges values with the
precedence explicit argument > file > default (`nvim` and `lazygit`):

```python
from projctl.config import ResolvedConfig, default_config_path, load_config

file_cfg = load_config(default_config_path())
cfg = ResolvedConfig.resolve(None, None, file_cfg)
print(cfg.editor, cfg.git_ui)
```

## Project registry (`projctl.models`)

The registry is stored as a flat JSON object: a `current` key followed by
one key per project name, each holding a path.

```python
from projctl.models import ensure_projects_db, get_projdir, load_projects, save_projects

ensure_projects_db()            # creates an empty registry if none exists
projects = load_projects()
projects.projects["blog"] = "/home/me/code/blog"
save_projects(projects)

print(get_projdir("blog"))      # Path to the project, or None if unknown
```

`Projects.from_dict` raises `ValueError` if the data is not an object or a
value is not a string.

## Project helpers (`projctl.utils`)

```python
from pathlib import Path
from projctl.utils import (
    autodetected_projects,
    compose_file,
    detect_dev_cmd,
    get_current_projdir,
    guess_backend_dir,
    guess_frontend_dir,
    parse_cmd,
)

proj = Path("~/projects/shop").expanduser()
print(guess_frontend_dir(proj))   # first of apps/web, web, frontend, client, packages/web
print(guess_backend_dir(proj))    # first of apps/api, api, backend, server, services/api, packages/api
print(compose_file(proj))         # compose.yml or docker-compose.yml
print(detect_dev_cmd(proj))       # dev command for JS, Rust, Go or Python projects

for name, path in autodetected_projects():   # sorted by name
    print(name, path)

print(parse_cmd("code --wait ."))  # ('code', ['--wait', '.'])
```

`detect_dev_cmd` prefers `cargo watch`, `air` or `uv` when those programs
are on `PATH`, and pipes output through `tee logs/app.log`; for a directory
it does not recognise it returns a command that prints a notice and starts
`$SHELL`.

`get_current_projdir()` reads the current project from the state file and
raises `FileNotFoundError` if none is set or the path no longer exists.
`canon` and `same_path` compare paths by their canonical form.

## tmux server sessions (`projctl.servers`, `projctl.tmux`)

`setup_servers(proj_dir, refresh, reset, kill)` builds (or attaches to) a
session named `<project>-servers` on a dedicated tmux server labelled
`projctl`, so it never collides with your own tmux sessions. The session has
`frontend`, `backend`, `docker`, `logs` and `scratch` windows; the dev
commands are started in the frontend and backend windows, and the docker
window is split into four panes for compose status, Postgres logs, Redis
logs and a spare shell. When run inside tmux it switches the client;
otherwise it attaches.

```python
from projctl.servers import setup_servers
from projctl.utils import get_current_projdir

setup_servers(get_current_projdir(), refresh=False, reset=False, kill=False)
```

- `refresh=True` creates missing windows and re-seeds the layout and
  commands in an existing session;
- `reset=True` kills an existing session and builds a fresh one;
- `kill=True` kills the session and does nothing else.

The `Tmux` class in `projctl.tmux` runs commands against the labelled server
(`run`, `out`, `ok`); failed tmux commands raise `projctl.tmux.TmuxError`.

## What this package does not do

projctl is a library only. It installs no command-line program, and it has
no functions for adding, removing, listing or switching projects beyond
reading and writing the registry, for writing the current-project state
file, for launching the configured editor or git UI, for opening logs, or
for creating databases.