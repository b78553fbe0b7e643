"""Configuration and theme loading."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type

import yaml

from configtool.exceptions import ConfigLoadError, ConfigtoolError, ThemeLoadError
from configtool.paths import config_file_path, theme_file_path, themes_dir


logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps 'on', 'off', 'yes', 'no' as plain strings."""
    pass


# Drop the implicit bool resolvers so theme keys and values such as 'on' or 'no'
# stay strings; a theme is a string-to-string map.
PreservingLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag != 'tag:yaml.org,2002:bool'
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class Configuration:
    """Target files plus the name of the active theme."""
    files: Tuple[Path, ...] = ()
    theme_name: str = ""

    @classmethod
    def default(cls) -> "Configuration":
        return cls()

    @classmethod
    def from_dict(cls, data: Any) -> "Configuration":
        """Build a Configuration from a parsed document.

        Raises:
            ValueError: If the document does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"config must be an object, got {type(data).__name__}")

        if 'files' not in data:
            raise ValueError("missing field 'files'")
        files = data['files']
        if not isinstance(files, list):
            raise ValueError(f"'files' must be a list, got {type(files).__name__}")
        for i, item in enumerate(files):
            if not isinstance(item, str):
                raise ValueError(f"'files[{i}]' must be a string")

        if 'theme_name' not in data:
            raise ValueError("missing field 'theme_name'")
        theme_name = data['theme_name']
        if not isinstance(theme_name, str):
            raise ValueError(f"'theme_name' must be a string, got {type(theme_name).__name__}")

        return cls(files=tuple(Path(item) for item in files), theme_name=theme_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "files": [str(path) for path in self.files],
            "theme_name": self.theme_name,
        }


def read_document(path: Path, error_cls: Type[ConfigtoolError], kind: str) -> Any:
    """
    Read and parse a JSON document.

    A .yaml/.yml file that is not valid JSON is parsed as YAML instead, so a
    well-formed JSON document always loads whatever its name.

    Args:
        path: File to read
        error_cls: Exception class raised on failure
        kind: Human readable document kind for error messages

    Returns:
        The parsed document
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError as e:
        raise error_cls(f"{kind} file not found", path=path, cause=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise error_cls(f"failed to read {kind} file", path=path, cause=e) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        if path.suffix.lower() not in YAML_SUFFIXES:
            raise error_cls(f"failed to parse {kind} file", path=path, cause=e) from e

    try:
        return yaml.load(text, Loader=PreservingLoader)
    except yaml.YAMLError as e:
        raise error_cls(f"failed to parse {kind} file", path=path, cause=e) from e


class ConfigLoader:
    """Loads config.json, scaffolding the config directory on first run."""

    def __init__(self, config_dir: Path):
        self.config_dir = config_dir

    @property
    def default_path(self) -> Path:
        return config_file_path(self.config_dir)

    def load(self, explicit_path: Optional[Path] = None) -> Optional[Configuration]:
        """
        Load the configuration.

        Args:
            explicit_path: Config file given on the command line, if any

        Returns:
            The configuration, or None when the default config was missing and
            the directory layout was scaffolded instead

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or has the wrong shape
        """
        if explicit_path is not None:
            path = explicit_path
        else:
            path = self.default_path
            if not path.exists():
                self.scaffold()
                return None

        logger.info(f"Loading config: {path}")
        data = read_document(path, ConfigLoadError, "config")
        try:
            config = Configuration.from_dict(data)
        except ValueError as e:
            raise ConfigLoadError("invalid config file", path=path, cause=e) from e

        logger.debug(f"Loaded config: {config.to_dict()}")
        return config

    def scaffold(self) -> Path:
        """
        Create the config and themes directories and write the default config.

        Returns:
            Path of the written config file
        """
        path = self.default_path
        try:
            themes_dir(self.config_dir).mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(Configuration.default().to_dict(), f, indent=2)
                f.write('\n')
        except OSError as e:
            raise ConfigLoadError("failed to create default config", path=path, cause=e) from e

        logger.info(f"Created default config: {path}")
        return path


class ThemeLoader:
    """Loads a theme by explicit path or by name from the themes directory."""

    def __init__(self, config_dir: Path):
        self.config_dir = config_dir

    def load(self, explicit_path: Optional[Path], theme_name: str) -> Dict[str, str]:
        """
        Load a flat string-to-string theme.

        Raises:
            ThemeLoadError: If the file cannot be read, parsed or is not a flat
                string map
        """
        if explicit_path is not None:
            path = explicit_path
        else:
            path = theme_file_path(self.config_dir, theme_name)

        logger.info(f"Loading theme: {path}")
        data = read_document(path, ThemeLoadError, "theme")

        if not isinstance(data, dict):
            raise ThemeLoadError(
                f"theme must be an object, got {type(data).__name__}", path=path
            )
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ThemeLoadError(
                    f"theme entry {key!r} must map a string to a string", path=path
                )

        logger.debug(f"Loaded theme: {data}")
        return data
