"""Tests for slot usage and immutability of the containers."""

import dataclasses

import pytest

import pyoutcome as po


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(po.Some(42))
    assert _check_slots(po.NoneOption())
    assert _check_slots(po.Err[int, object](42))
    assert _check_slots(po.Ok[int, object](42))
    assert _check_slots(po.UNIT)


def test_frozen_variants() -> None:
    """Test payloads cannot be reassigned after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        po.Some(1).value = 2  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        po.Ok(1).value = 2  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        po.Err("e").error = "f"  # type: ignore[misc]


def test_combinators_return_new_instances() -> None:
    """Test combinators leave the receiver untouched and never hand it back."""
    source = po.Ok(1)
    mapped = source.map_err(str)
    assert mapped == source
    assert mapped is not source
    assert source.value == 1


def test_flat_flatten_returns_new_instance() -> None:
    """Test flatten on an already flat container builds an equal copy."""
    some = po.Some(3)
    ok = po.Ok(1)
    assert some.flatten() == some
    assert some.flatten() is not some
    assert ok.flatten() == ok
    assert ok.flatten() is not ok


def test_or_else_returns_new_instance() -> None:
    """Test or_else on a present value builds an equal copy."""
    some = po.Some("kept")
    ok = po.Ok("kept")
    assert some.or_else(lambda: po.Some("other")) == some
    assert some.or_else(lambda: po.Some("other")) is not some
    assert ok.or_else(lambda _: po.Ok("other")) == ok
    assert ok.or_else(lambda _: po.Ok("other")) is not ok


def test_hashable_with_hashable_payload() -> None:
    """Test equal containers hash equally."""
    assert len({po.Some(1), po.Some(1), po.NONE, po.NoneOption()}) == 2
    assert hash(po.Ok("a")) == hash(po.Ok("a"))
