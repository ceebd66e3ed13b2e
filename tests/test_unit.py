"""Tests for the Unit marker."""

import copy
import pickle

from pyoutcome import NONE, UNIT, Ok, Option, Some, Unit


def test_single_instance() -> None:
    """Test every construction returns UNIT."""
    assert Unit() is UNIT
    assert copy.copy(UNIT) is UNIT
    assert copy.deepcopy(UNIT) is UNIT
    assert pickle.loads(pickle.dumps(UNIT)) is UNIT


def test_rendering() -> None:
    """Test repr and str of UNIT."""
    assert repr(UNIT) == "UNIT"
    assert str(UNIT) == "()"
    assert str(Ok(UNIT)) == "()"


def test_as_payload() -> None:
    """Test Unit works as a container payload."""
    opt: Option[Unit] = Some(UNIT)
    assert opt.contains(UNIT)
    assert len({UNIT, Unit()}) == 1
    assert NONE.ignore() == NONE
