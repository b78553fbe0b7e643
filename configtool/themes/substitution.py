"""
Theme substitution implementation.
Rewrites target files in place, replacing every theme key with its value.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Sequence

from configtool.exceptions import TargetFileError


logger = logging.getLogger(__name__)


class ThemeSubstitutor:
    """
    Applies a theme to text and to files.

    Keys are replaced one after another in the theme's iteration order, each
    pass running over the output of the previous one. A value inserted by an
    earlier key is therefore visible to later keys: {"A": "B", "B": "C"}
    turns "A" into "C".

    Files are processed strictly in order and rewritten without backup. The
    first failure stops processing; files already written stay modified.
    """

    ENCODING = 'utf-8'

    def substitute(self, text: str, theme: Mapping[str, str]) -> str:
        """
        Replace every occurrence of each theme key in text.

        Args:
            text: Original contents
            theme: Literal search string to replacement string

        Returns:
            Contents with all keys replaced
        """
        for key, value in theme.items():
            text = text.replace(key, value)
        return text

    def apply_file(self, path: Path, theme: Mapping[str, str]) -> bool:
        """
        Substitute a single file in place.

        Returns:
            True if the file contents changed

        Raises:
            TargetFileError: If the file cannot be read as text or written
        """
        # newline='' keeps CRLF/LF exactly as found
        try:
            with open(path, 'r', encoding=self.ENCODING, newline='') as f:
                contents = f.read()
        except FileNotFoundError as e:
            raise TargetFileError("target file not found", path=path, cause=e) from e
        except UnicodeDecodeError as e:
            raise TargetFileError("target file is not valid text", path=path, cause=e) from e
        except OSError as e:
            raise TargetFileError("failed to read target file", path=path, cause=e) from e

        result = self.substitute(contents, theme)

        try:
            with open(path, 'w', encoding=self.ENCODING, newline='') as f:
                f.write(result)
        except OSError as e:
            raise TargetFileError("failed to write target file", path=path, cause=e) from e

        changed = result != contents
        logger.debug(f"{'Updated' if changed else 'Unchanged'}: {path}")
        return changed

    def apply(self, theme: Mapping[str, str], files: Sequence[Path]) -> List[Path]:
        """
        Apply a theme to each file in order.

        Args:
            theme: Theme to apply
            files: Target files, processed in the given order

        Returns:
            The files that were processed

        Raises:
            TargetFileError: On the first file that fails; later files are
                left untouched
        """
        processed = []
        for path in files:
            logger.debug(f"Processing file: {path}")
            self.apply_file(path, theme)
            processed.append(path)
        return processed
