"""Tests for applying themes to text and files."""

import builtins
from pathlib import Path
from unittest.mock import patch

import pytest

from configtool.exceptions import TargetFileError
from configtool.themes import ThemeSubstitutor


class TestSubstitute:
    """Test literal key-by-key substitution on strings."""

    def setup_method(self):
        self.substitutor = ThemeSubstitutor()

    def test_basic_replacement(self):
        result = self.substitutor.substitute("hello FOO world", {"FOO": "bar"})
        assert result == "hello bar world"

    def test_all_occurrences_replaced(self):
        result = self.substitutor.substitute("FOO FOO FOOFOO", {"FOO": "x"})
        assert result == "x x xx"

    def test_keys_applied_sequentially(self):
        """A value inserted by an earlier key is rewritten by a later key."""
        result = self.substitutor.substitute("A", {"A": "B", "B": "C"})
        assert result == "C"

    def test_order_matters(self):
        """Reversed order: B is replaced before A produces it."""
        result = self.substitutor.substitute("A", {"B": "C", "A": "B"})
        assert result == "B"

    def test_no_recursive_expansion_within_key(self):
        result = self.substitutor.substitute("A", {"A": "AA"})
        assert result == "AA"

    def test_non_overlapping_left_to_right(self):
        result = self.substitutor.substitute("aaa", {"aa": "b"})
        assert result == "ba"

    def test_empty_theme_is_identity(self):
        assert self.substitutor.substitute("unchanged", {}) == "unchanged"

    def test_idempotent_without_retrigger(self):
        theme = {"#000000": "#282828", "#ffffff": "#ebdbb2"}
        once = self.substitutor.substitute("fg=#ffffff bg=#000000", theme)
        twice = self.substitutor.substitute(once, theme)
        assert once == twice == "fg=#ebdbb2 bg=#282828"


class TestApplyFiles:
    """Test in-place rewriting of target files."""

    def setup_method(self):
        self.substitutor = ThemeSubstitutor()

    def test_apply_file_rewrites_in_place(self, tmp_path: Path):
        target = tmp_path / 'kitty.conf'
        target.write_text("background BG\nforeground FG\n")

        changed = self.substitutor.apply_file(target, {"BG": "#000", "FG": "#fff"})

        assert changed is True
        assert target.read_text() == "background #000\nforeground #fff\n"

    def test_apply_file_reports_unchanged(self, tmp_path: Path):
        target = tmp_path / 'plain.txt'
        target.write_text("nothing to see")

        assert self.substitutor.apply_file(target, {"FOO": "bar"}) is False
        assert target.read_text() == "nothing to see"

    def test_line_endings_preserved(self, tmp_path: Path):
        target = tmp_path / 'dos.ini'
        target.write_bytes(b"color=FOO\r\nother=1\r\n")

        self.substitutor.apply_file(target, {"FOO": "red"})

        assert target.read_bytes() == b"color=red\r\nother=1\r\n"

    def test_missing_file_is_error(self, tmp_path: Path):
        missing = tmp_path / 'missing.conf'

        with pytest.raises(TargetFileError) as exc_info:
            self.substitutor.apply_file(missing, {"a": "b"})

        assert exc_info.value.path == missing
        assert "target file not found" in str(exc_info.value)
        assert not missing.exists()

    def test_binary_file_is_error(self, tmp_path: Path):
        target = tmp_path / 'image.bin'
        target.write_bytes(b"\xff\xfe\x00\x80")

        with pytest.raises(TargetFileError) as exc_info:
            self.substitutor.apply_file(target, {"a": "b"})

        assert "not valid text" in str(exc_info.value)
        assert target.read_bytes() == b"\xff\xfe\x00\x80"

    def test_apply_processes_files_in_order(self, tmp_path: Path):
        first = tmp_path / 'first'
        second = tmp_path / 'second'
        first.write_text("FOO")
        second.write_text("FOO FOO")

        processed = self.substitutor.apply({"FOO": "bar"}, [first, second])

        assert processed == [first, second]
        assert first.read_text() == "bar"
        assert second.read_text() == "bar bar"

    def test_failure_halts_and_keeps_earlier_files(self, tmp_path: Path):
        first = tmp_path / 'a.txt'
        missing = tmp_path / 'b.txt'
        third = tmp_path / 'c.txt'
        first.write_text("FOO")
        third.write_text("FOO")

        with pytest.raises(TargetFileError) as exc_info:
            self.substitutor.apply({"FOO": "bar"}, [first, missing, third])

        assert exc_info.value.path == missing
        # No rollback of earlier files, no processing of later ones
        assert first.read_text() == "bar"
        assert third.read_text() == "FOO"

    def test_write_failure_is_error(self, tmp_path: Path):
        target = tmp_path / 'locked.conf'
        target.write_text("FOO")
        real_open = builtins.open

        def open_read_only(file, mode='r', *args, **kwargs):
            if 'w' in mode:
                raise PermissionError(13, 'Permission denied', str(file))
            return real_open(file, mode, *args, **kwargs)

        with patch('builtins.open', side_effect=open_read_only):
            with pytest.raises(TargetFileError) as exc_info:
                self.substitutor.apply_file(target, {"FOO": "bar"})

        assert exc_info.value.path == target
        assert "failed to write target file" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, PermissionError)
        assert target.read_text() == "FOO"
