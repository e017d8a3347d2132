from __future__ import annotations

import pytest

pytest.importorskip("mini_arcade_native_backend")

from tick_pong.app import parse_args  # noqa: E402


def test_defaults():
    args = parse_args([])
    assert args.variant == "rally"
    assert args.difficulty == "normal"


def test_difficulty_choice():
    args = parse_args(["--variant", "versus", "--difficulty", "hard"])
    assert (args.variant, args.difficulty) == ("versus", "hard")


def test_unknown_difficulty_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--difficulty", "nightmare"])
