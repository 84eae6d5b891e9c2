"""Tests for positional argument binding (core/arguments.py)."""

from __future__ import annotations

import dataclasses

import pytest

from clog.core.arguments import PROG, USAGE, Arguments
from clog.exceptions import MissingArgumentsError


class TestUsage:
    def test_usage_text(self) -> None:
        assert USAGE == "Usage: clog <input dir> <output dir>"

    def test_prog_name(self) -> None:
        assert PROG == "clog"


class TestParse:
    def test_binds_two_tokens(self) -> None:
        args = Arguments.parse(["/tmp/in", "/tmp/out"])
        assert args.input_dir == "/tmp/in"
        assert args.output_dir == "/tmp/out"

    def test_extra_tokens_ignored(self) -> None:
        assert Arguments.parse(["a", "b", "c"]) == Arguments("a", "b")

    def test_accepts_tuple(self) -> None:
        assert Arguments.parse(("a", "b")) == Arguments("a", "b")

    @pytest.mark.parametrize("argv", [[], ["foo"]])
    def test_too_few_tokens_raise(self, argv: list[str]) -> None:
        with pytest.raises(MissingArgumentsError) as exc_info:
            Arguments.parse(argv)
        assert str(exc_info.value) == USAGE

    def test_flag_like_tokens_are_values(self) -> None:
        args = Arguments.parse(["--help", "-x"])
        assert args == Arguments("--help", "-x")

    def test_empty_strings_are_values(self) -> None:
        assert Arguments.parse(["", ""]) == Arguments("", "")

    def test_nonexistent_paths_not_checked(self) -> None:
        args = Arguments.parse(["/does/not/exist", "relative/out"])
        assert args.input_dir == "/does/not/exist"


class TestArgumentsModel:
    def test_frozen(self) -> None:
        args = Arguments("a", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            args.input_dir = "c"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Arguments("a", "b") == Arguments("a", "b")
        assert Arguments("a", "b") != Arguments("b", "a")
