"""configtool exceptions."""

from pathlib import Path
from typing import Optional


class ConfigtoolError(Exception):
    """Base error for every fatal condition.

    Components raise subclasses of this; the CLI command catches them,
    logs the message and maps them to the process exit code.
    """

    exit_code = 1

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        cause: Optional[BaseException] = None
    ):
        self.message = message
        self.path = path
        self.cause = cause

        text = message
        if path is not None:
            text = f"{text}: {path}"
        if cause is not None:
            text = f"{text} ({cause})"

        super().__init__(text)


class EnvironmentNotConfiguredError(ConfigtoolError):
    """Raised when neither $XDG_CONFIG_HOME nor $HOME is defined."""


class ConfigLoadError(ConfigtoolError):
    """Raised when the configuration file cannot be read or parsed."""


class ThemeLoadError(ConfigtoolError):
    """Raised when the theme file cannot be read or parsed."""


class TargetFileError(ConfigtoolError):
    """Raised when a target file cannot be read, decoded or written."""
