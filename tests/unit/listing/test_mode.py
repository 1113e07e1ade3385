"""Tests for mode bit formatting."""

import pytest
from dirls.listing.mode import format_mode


class TestFormatMode:
    """Tests for format_mode."""

    def test_regular_file(self) -> None:
        """A 644 regular file renders as -rw-r--r--."""
        assert format_mode(0o100644) == "-rw-r--r--"

    def test_directory(self) -> None:
        """A 755 directory renders as drwxr-xr-x."""
        assert format_mode(0o040755) == "drwxr-xr-x"

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (0o140777, "s"),
            (0o060660, "b"),
            (0o120777, "l"),
            (0o020620, "c"),
            (0o010644, "p"),
            (0o000644, "?"),
            (0o170644, "?"),
        ],
    )
    def test_type_character(self, mode: int, expected: str) -> None:
        """Each file type maps to its ls character."""
        assert format_mode(mode)[0] == expected

    def test_no_permissions(self) -> None:
        """Mode without permission bits renders dashes."""
        assert format_mode(0o100000) == "----------"

    def test_all_permissions(self) -> None:
        """Mode 777 renders all flags."""
        assert format_mode(0o100777) == "-rwxrwxrwx"

    def test_special_bits_ignored(self) -> None:
        """Setuid, setgid and sticky bits are not rendered."""
        assert format_mode(0o107755) == "-rwxr-xr-x"

    def test_groups_are_independent(self) -> None:
        """Owner, group and other bits render in that order."""
        assert format_mode(0o100421) == "-r---w---x"

    @pytest.mark.parametrize("mode", [0, 0o777, 0o177777, 0xFFFFFFFF, 0o040000])
    def test_length_is_always_ten(self, mode: int) -> None:
        """Output is always ten characters with a known type character."""
        result = format_mode(mode)
        assert len(result) == 10
        assert result[0] in "sbd-lcp?"
