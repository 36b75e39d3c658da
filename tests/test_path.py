import pytest

from hyprutils.path import (
    check_config_exists,
    find_config,
    full_config_path,
    get_home,
    get_xdg_config_dirs,
    get_xdg_config_home,
)

PROGRAM = "hyprutils-test-program-unlikely"


def _make_config(base, program=PROGRAM):
    target = base / "hypr"
    target.mkdir(parents=True, exist_ok=True)
    path = target / f"{program}.conf"
    path.write_text("")
    return path


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("HOME", "XDG_CONFIG_HOME", "XDG_CONFIG_DIRS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_full_config_path_layout():
    assert full_config_path("/base", "prog") == "/base/hypr/prog.conf"


def test_check_config_exists(tmp_path):
    assert check_config_exists(str(tmp_path), PROGRAM) is False
    _make_config(tmp_path)
    assert check_config_exists(str(tmp_path), PROGRAM) is True


def test_get_home(clean_env, tmp_path):
    assert get_home() is None
    clean_env.setenv("HOME", "relative/home")
    assert get_home() is None
    clean_env.setenv("HOME", str(tmp_path))
    assert get_home() == str(tmp_path) + "/.config"


def test_get_xdg_config_home(clean_env, tmp_path):
    assert get_xdg_config_home() is None
    clean_env.setenv("XDG_CONFIG_HOME", "not/absolute")
    assert get_xdg_config_home() is None
    clean_env.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_xdg_config_home() == str(tmp_path)


def test_get_xdg_config_dirs(clean_env):
    assert get_xdg_config_dirs() is None
    clean_env.setenv("XDG_CONFIG_DIRS", "/first:/second")
    dirs = get_xdg_config_dirs()
    assert list(dirs) == ["/first", "/second"]


def test_find_config_prefers_xdg_config_home(clean_env, tmp_path):
    xdg_home = tmp_path / "xdg"
    home = tmp_path / "home"
    expected = _make_config(xdg_home)
    _make_config(home / ".config")
    clean_env.setenv("XDG_CONFIG_HOME", str(xdg_home))
    clean_env.setenv("HOME", str(home))
    assert find_config(PROGRAM) == (str(expected), str(xdg_home))


def test_find_config_falls_back_to_home(clean_env, tmp_path):
    home = tmp_path / "home"
    expected = _make_config(home / ".config")
    clean_env.setenv("XDG_CONFIG_HOME", str(tmp_path / "empty"))
    clean_env.setenv("HOME", str(home))
    assert find_config(PROGRAM) == (str(expected), str(home) + "/.config")


def test_find_config_in_xdg_config_dirs(clean_env, tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    expected = _make_config(second)
    clean_env.setenv("XDG_CONFIG_DIRS", f"{first}:{second}")
    assert find_config(PROGRAM) == (str(expected), None)


def test_find_config_not_found_reports_base(clean_env, tmp_path):
    clean_env.setenv("HOME", str(tmp_path))
    assert find_config(PROGRAM) == (None, str(tmp_path) + "/.config")
    clean_env.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert find_config(PROGRAM) == (None, str(tmp_path / "xdg"))


def test_find_config_nothing_set(clean_env):
    assert find_config(PROGRAM) == (None, None)