import shutil
from pathlib import Path

import pytest

from projctl import utils


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def test_expand_tilde_prefix(home):
    assert utils.expand_tilde("~/projects") == home / "projects"


def test_expand_tilde_alone(home):
    assert utils.expand_tilde("~") == home


def test_expand_tilde_leaves_other_paths(home):
    assert utils.expand_tilde("/abs/path") == Path("/abs/path")
    assert utils.expand_tilde("~other/x") == Path("~other/x")


def test_well_known_locations(home):
    assert utils.get_projects_db() == home / ".config/projctl/projects.json"
    assert utils.get_state() == home / ".cache/current_project"
    assert utils.get_projects_dir() == home / "projects"


def test_current_projdir_unset(home):
    with pytest.raises(FileNotFoundError, match="No current project set"):
        utils.get_current_projdir()


def test_current_projdir_reads_trimmed_path(home):
    proj = home / "proj"
    proj.mkdir()
    state = utils.get_state()
    state.parent.mkdir(parents=True)
    state.write_text(f"  {proj}\n")
    assert utils.get_current_projdir() == proj


def test_current_projdir_missing_path(home):
    state = utils.get_state()
    state.parent.mkdir(parents=True)
    state.write_text(str(home / "gone"))
    with pytest.raises(FileNotFoundError, match="does not exist"):
        utils.get_current_projdir()


def test_detect_dev_cmd_node(tmp_path):
    (tmp_path / "package.json").write_text("{}")
    assert utils.detect_dev_cmd(tmp_path) == (
        "mkdir -p logs && (pnpm run dev || npm run dev || yarn dev) 2>&1 | tee logs/app.log"
    )


@pytest.mark.parametrize(
    "marker, found, expected",
    [
        ("Cargo.toml", True, "mkdir -p logs && cargo watch -x run 2>&1 | tee logs/app.log"),
        ("Cargo.toml", False, "mkdir -p logs && cargo run 2>&1 | tee logs/app.log"),
        ("go.mod", True, "mkdir -p logs && air 2>&1 | tee logs/app.log"),
        ("go.mod", False, "mkdir -p logs && go run ./... 2>&1 | tee logs/app.log"),
        ("pyproject.toml", True, "mkdir -p logs && uv run python -m app 2>&1 | tee logs/app.log"),
        ("requirements.txt", False, "mkdir -p logs && python -m app 2>&1 | tee logs/app.log"),
    ],
)
def test_detect_dev_cmd_tools(tmp_path, monkeypatch, marker, found, expected):
    (tmp_path / marker).write_text("")
    monkeypatch.setattr(shutil, "which", lambda name: "/bin/x" if found else None)
    assert utils.detect_dev_cmd(tmp_path) == expected


def test_detect_dev_cmd_fallback_uses_shell(tmp_path, monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/fish")
    assert utils.detect_dev_cmd(tmp_path) == "echo 'No dev command detected'; /bin/fish"
    monkeypatch.delenv("SHELL")
    assert utils.detect_dev_cmd(tmp_path) == "echo 'No dev command detected'; sh"


def test_guess_frontend_dir_order(tmp_path):
    assert utils.guess_frontend_dir(tmp_path) is None
    (tmp_path / "client").mkdir()
    assert utils.guess_frontend_dir(tmp_path) == tmp_path / "client"
    (tmp_path / "web").mkdir()
    assert utils.guess_frontend_dir(tmp_path) == tmp_path / "web"


def test_guess_backend_dir_order(tmp_path):
    assert utils.guess_backend_dir(tmp_path) is None
    (tmp_path / "api").mkdir()
    (tmp_path / "apps" / "api").mkdir(parents=True)
    assert utils.guess_backend_dir(tmp_path) == tmp_path / "apps" / "api"


def test_compose_file_preference(tmp_path):
    assert utils.compose_file(tmp_path) is None
    (tmp_path / "docker-compose.yml").write_text("")
    assert utils.compose_file(tmp_path) == tmp_path / "docker-compose.yml"
    (tmp_path / "compose.yml").write_text("")
    assert utils.compose_file(tmp_path) == tmp_path / "compose.yml"


def test_autodetected_projdir(home):
    projects = home / "projects"
    (projects / "alpha").mkdir(parents=True)
    (projects / "notes").write_text("")
    assert utils.get_autodetected_projdir("alpha") == projects / "alpha"
    assert utils.get_autodetected_projdir("notes") is None
    assert utils.get_autodetected_projdir("missing") is None


def test_autodetected_projects_sorted_dirs_only(home):
    assert utils.autodetected_projects() == []
    projects = home / "projects"
    for name in ("zeta", "alpha", "mid"):
        (projects / name).mkdir(parents=True)
    (projects / "file.txt").write_text("")
    result = utils.autodetected_projects()
    assert [name for name, _ in result] == ["alpha", "mid", "zeta"]
    assert all(path == projects / name for name, path in result)


def test_canon_and_same_path(tmp_path, monkeypatch):
    (tmp_path / "a").mkdir()
    monkeypatch.chdir(tmp_path)
    assert utils.same_path(Path("a/../a"), tmp_path / "a")
    assert not utils.same_path(tmp_path / "a", tmp_path)
    assert utils.canon(Path("nope")) == Path.cwd() / "nope"
    assert utils.canon(Path("/no/such/dir")) == Path("/no/such/dir")


@pytest.mark.parametrize(
    "cmd, expected",
    [
        ("nvim", ("nvim", [])),
        ("code --wait", ("code", ["--wait"])),
        ('nvim "my file"', ("nvim", ["my file"])),
        ("", ("", [])),
        ('vim "x', ('vim "x', [])),
    ],
)
def test_parse_cmd(cmd, expected):
    assert utils.parse_cmd(cmd) == expected