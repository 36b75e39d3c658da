"""Locating configuration files following the XDG base directory layout."""

from __future__ import annotations

import os
from typing import Optional

from hyprutils.varlist import VarList

_SYSTEM_CONFIG_DIR = "/etc/xdg"


def full_config_path(base_path: str, program_name: str) -> str:
    """The config path ``base_path/hypr/program_name.conf``."""
    return base_path + "/hypr/" + program_name + ".conf"


def check_config_exists(base_path: str, program_name: str) -> bool:
    """Whether the config for ``program_name`` exists under ``base_path``."""
    return os.path.exists(full_config_path(base_path, program_name))


def get_home() -> Optional[str]:
    """``$HOME/.config`` when ``$HOME`` is an absolute path, otherwise None."""
    home = os.environ.get("HOME")
    if not home or not os.path.isabs(home):
        return None
    return home + "/.config"


def get_xdg_config_dirs() -> Optional[VarList]:
    """The entries of ``$XDG_CONFIG_DIRS``, or None when it is unset."""
    dirs = os.environ.get("XDG_CONFIG_DIRS")
    if dirs is None:
        return None
    return VarList(dirs, 0, ":")


def get_xdg_config_home() -> Optional[str]:
    """``$XDG_CONFIG_HOME`` when it is an absolute path, otherwise None."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if not config_home or not os.path.isabs(config_home):
        return None
    return config_home


def find_config(program_name: str) -> tuple[Optional[str], Optional[str]]:
    """Search for a config and return ``(config path, base path)``.

    Searched in order: ``$XDG_CONFIG_HOME``, ``$HOME/.config``,
    ``$XDG_CONFIG_DIRS`` and ``/etc/xdg``. The base path is given only for the
    per-user locations; when nothing is found it names the first of those
    that is set, so a config can be created there.
    """
    xdg_config_home = get_xdg_config_home()
    if xdg_config_home is not None and check_config_exists(xdg_config_home, program_name):
        return full_config_path(xdg_config_home, program_name), xdg_config_home

    home = get_home()
    if home is not None and check_config_exists(home, program_name):
        return full_config_path(home, program_name), home

    xdg_config_dirs = get_xdg_config_dirs()
    if xdg_config_dirs is not None:
        for directory in xdg_config_dirs:
            if check_config_exists(directory, program_name):
                return full_config_path(directory, program_name), None

    if check_config_exists(_SYSTEM_CONFIG_DIR, program_name):
        return full_config_path(_SYSTEM_CONFIG_DIR, program_name), None

    if xdg_config_home is not None:
        return None, xdg_config_home
    if home is not None:
        return None, home
    return None, None