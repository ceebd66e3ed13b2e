"""Tests for the Result container."""

import pytest

import pyoutcome as po
from pyoutcome import NONE, Err, Ok, Result, Some


def test_ok_holds_value() -> None:
    """Test that Ok stores the value as given."""
    s = "result"
    res = Ok(s)
    assert res.value is s
    assert res.is_ok()
    assert not res.is_err()


def test_err_holds_error() -> None:
    """Test that Err stores the very same error object."""
    err = ValueError("some error")
    res: Result[int, ValueError] = Err(err)
    assert res.error is err
    assert res.is_err()


def test_map_ok() -> None:
    """Test mapping an Ok value."""
    assert Ok(42).map(str) == Ok("42")


def test_map_err_keeps_payload_identity() -> None:
    """Test mapping an Err forwards the same payload without calling f."""
    err = ValueError("some error")
    calls: list[int] = []
    res: Result[int, ValueError] = Err(err)
    mapped = res.map(lambda v: calls.append(v) or v == 0)
    assert mapped.unwrap_err() is err
    assert calls == []


def test_map_error() -> None:
    """Test map_err only touches Err."""
    assert Ok("something").map_err(lambda _: "other") == Ok("something")
    res = Err(ValueError("something failed")).map_err(lambda e: f"oh no {e}")
    assert res == Err("oh no something failed")


def test_bind() -> None:
    """Test binding Ok and Err."""
    err = ValueError("some error")
    assert Ok(42).bind(lambda v: Ok(str(v))) == Ok("42")
    bound = Err(err).bind(lambda v: Ok(v == 0))
    assert bound.unwrap_err() is err


def test_match() -> None:
    """Test match hands the error to the failure branch."""
    message = "oh no, here we go again"
    assert Ok(42).match(str, str) == "42"
    assert Err(ValueError(message)).match(str, str) == message


def test_unwrap() -> None:
    """Test unwrap on both variants."""
    assert Ok(420).unwrap() == 420
    with pytest.raises(po.ResultUnwrapError, match="its about to get real bad"):
        Err(RuntimeError("its about to get real bad")).unwrap()


def test_unwrap_err() -> None:
    """Test unwrap_err on both variants."""
    err = KeyError("k")
    assert Err(err).unwrap_err() is err
    with pytest.raises(po.ResultUnwrapError, match="called `unwrap_err` on Ok"):
        Ok(1).unwrap_err()


def test_expect_variants() -> None:
    """Test expect and expect_err messages."""
    assert Ok(1).expect("never shown") == 1
    with pytest.raises(po.ResultUnwrapError, match="loading failed: disk"):
        Err("disk").expect("loading failed")
    with pytest.raises(po.ResultUnwrapError, match=r"expected Err, got Ok\(1\)"):
        Ok(1).expect_err("should fail")


def test_string_rendering() -> None:
    """Test str() of both variants."""
    assert str(Ok("Hi!")) == "Hi!"
    err = ValueError("hello from the other side")
    assert str(Err(err)) == str(err)


class TestFromPair:
    """Tests for Result.from_pair."""

    def test_no_error(self) -> None:
        """Test a None error yields Ok."""

        def returns_pair() -> tuple[int, Exception | None]:
            return 586, None

        assert Result.from_pair(*returns_pair()) == Ok(586)

    def test_with_error(self) -> None:
        """Test a present error yields Err."""
        expected = ValueError("oops")
        res = Result.from_pair(0, expected)
        assert res.unwrap_err() is expected


def test_contains() -> None:
    """Test contains on both variants."""
    assert Ok("something").contains("something")
    assert not Err("error").contains("other thing")


def test_defaults() -> None:
    """Test default_value and default_with."""
    assert Ok(357).default_value(42) == 357
    assert Err("error").default_value(357) == 357
    assert Ok(357).default_with(lambda _: 0) == 357
    assert Err("error").default_with(lambda _: 0) == 0


def test_exists() -> None:
    """Test exists on both variants."""
    assert Ok(42).exists(lambda i: i > 41)
    assert not Err("error").exists(lambda i: i > 41)


def test_fold() -> None:
    """Test fold on both variants."""
    assert Ok(667).fold(110, lambda s, i: s + i) == 777
    assert Err("error").fold(110, lambda s, _: s + 1) == 110


def test_fold_to_result() -> None:
    """Test fold_to_result forwards the error."""
    assert Ok(2).fold_to_result(3, lambda s, i: s * i) == Ok(6)
    assert Err("e").fold_to_result(3, lambda s, i: s * i) == Err("e")


def test_for_each_with_mutable_payload() -> None:
    """Test for_each reaches the payload by reference."""
    value = [0]
    res = Ok(value)
    res.for_each(lambda v: v.__setitem__(0, v[0] + 1))
    assert value == [1]
    assert res.value is value
    calls: list[object] = []
    Err("error").for_each(calls.append)
    assert calls == []


def test_iter() -> None:
    """Test iteration yields the Ok value only."""
    assert list(Ok(1)) == [1]
    assert list(Err("e")) == []


def test_to_option() -> None:
    """Test conversion to Option discards the error."""
    assert Ok(146).to_option() == Some(146)
    assert Err("error").to_option() == NONE


def test_err_option() -> None:
    """Test err() keeps the error instead."""
    assert Err("error").err() == Some("error")
    assert Ok(1).err() == NONE


class TestCombineBy:
    """Tests for Result.combine_by."""

    def test_both_ok(self) -> None:
        """Test the scenario Ok(42) combined with Ok('nice')."""
        res = Ok(42).combine_by(Ok("nice"), lambda s, i: s == "nice" or i == 42)
        assert res == Ok(True)

    def test_primary_error_wins(self) -> None:
        """Test that self's error takes precedence."""
        first, second = ValueError("first"), ValueError("second")
        res = Err(first).combine_by(Err(second), lambda w, t: (w, t))
        assert res.unwrap_err() is first

    def test_secondary_error(self) -> None:
        """Test that other's error is used when self is Ok."""
        second = ValueError("second")
        res = Ok(1).combine_by(Err(second), lambda w, t: (w, t))
        assert res.unwrap_err() is second


class TestFlatten:
    """Tests for Result.flatten."""

    def test_ok_ok(self) -> None:
        """Test Ok(Ok(v)) flattens to Ok(v)."""
        assert Ok(Ok(1)).flatten() == Ok(1)

    def test_ok_err(self) -> None:
        """Test Ok(Err(e)) flattens to Err(e)."""
        err = ValueError("inner")
        assert Ok(Err(err)).flatten().unwrap_err() is err

    def test_err(self) -> None:
        """Test Err stays Err."""
        assert Err("outer").flatten() == Err("outer")

    def test_already_flat(self) -> None:
        """Test flat input is returned unchanged."""
        assert Ok(1).flatten() == Ok(1)


def test_filter() -> None:
    """Test filter turns rejected values into errors."""
    assert Ok(4).filter(lambda x: x > 3, str) == Ok(4)
    assert Ok(2).filter(lambda x: x > 3, lambda x: f"{x} too small") == Err(
        "2 too small"
    )
    assert Err("e").filter(lambda _: True, str) == Err("e")


def test_ignore() -> None:
    """Test ignore discards the value only."""
    assert Ok(3).ignore() == Ok(po.UNIT)
    assert Err("e").ignore() == Err("e")


def test_or_else() -> None:
    """Test or_else recovers from an error."""
    assert Err("e").or_else(lambda e: Ok(len(e))) == Ok(1)
    assert Ok(5).or_else(lambda _: Ok(0)) == Ok(5)


class TestSafe:
    """Tests for the safe decorator."""

    def test_bare_decorator(self) -> None:
        """Test the bare form captures any Exception."""

        @po.safe
        def parse(text: str) -> int:
            return int(text)

        assert parse("12") == Ok(12)
        assert isinstance(parse("x").unwrap_err(), ValueError)

    def test_selected_exceptions(self) -> None:
        """Test only the listed exceptions are captured."""

        @po.safe(exceptions=(KeyError,))
        def lookup(data: dict[str, int], key: str) -> int:
            if not data:
                msg = "empty"
                raise RuntimeError(msg)
            return data[key]

        assert lookup({"a": 1}, "a") == Ok(1)
        assert isinstance(lookup({"a": 1}, "b").unwrap_err(), KeyError)
        with pytest.raises(RuntimeError, match="empty"):
            lookup({}, "a")

    def test_keeps_metadata(self) -> None:
        """Test functools.wraps metadata is preserved."""

        @po.safe
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


def test_describable_payloads() -> None:
    """Test common failure payloads satisfy the Describable protocol."""
    assert isinstance(ValueError("x"), po.Describable)
    assert isinstance("plain message", po.Describable)
    assert str(Err(KeyError("k"))) == str(KeyError("k"))


class _LooseEq:
    def __eq__(self, other: object) -> object:
        return "truthy but not a bool"

    __hash__ = object.__hash__


def test_boolean_queries_return_bool() -> None:
    """Test exists and contains always return a real bool."""
    assert Ok(5).exists(lambda x: x) is True
    assert Ok("").exists(lambda x: x) is False
    assert Ok(_LooseEq()).contains(1) is True
    assert Err("e").exists(lambda x: x) is False
