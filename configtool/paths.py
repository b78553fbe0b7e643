"""Configuration directory resolution from the environment."""

import os
from pathlib import Path
from typing import Mapping, Optional

from configtool.exceptions import EnvironmentNotConfiguredError


APP_DIR_NAME = "configtool"
CONFIG_FILE_NAME = "config.json"
THEMES_DIR_NAME = "themes"


def resolve_config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the base directory for configtool's persistent data.

    $XDG_CONFIG_HOME/configtool wins; otherwise $HOME/.config/configtool.
    A variable set to the empty string still counts as set.

    Raises:
        EnvironmentNotConfiguredError: If neither variable is defined
    """
    if environ is None:
        environ = os.environ

    config_home = environ.get("XDG_CONFIG_HOME")
    if config_home is not None:
        return Path(config_home) / APP_DIR_NAME

    home = environ.get("HOME")
    if home is not None:
        return Path(home) / ".config" / APP_DIR_NAME

    raise EnvironmentNotConfiguredError("$XDG_CONFIG_HOME or $HOME must be defined")


def config_file_path(config_dir: Path) -> Path:
    return config_dir / CONFIG_FILE_NAME


def themes_dir(config_dir: Path) -> Path:
    return config_dir / THEMES_DIR_NAME


def theme_file_path(config_dir: Path, theme_name: str) -> Path:
    """Path of a named theme. The name is not checked for traversal."""
    return themes_dir(config_dir) / theme_name
