"""Tests for structural pattern matching on the variants."""

from __future__ import annotations

from pyoutcome import NONE, Err, Ok, Option, Result, Some


def _describe_result(result: Result[int, str]) -> str:
    match result:
        case Ok(value):
            return f"ok {value}"
        case Err(error):
            return f"err {error}"
        case _:
            raise AssertionError


def _describe_option(option: Option[str]) -> str:
    match option:
        case Some(value):
            return f"some {value}"
        case _:
            return "none"


def test_result_pattern_matching() -> None:
    """Test Result pattern matching."""
    assert _describe_result(Ok(42)) == "ok 42"
    assert _describe_result(Err("Something went wrong")) == "err Something went wrong"


def test_option_pattern_matching() -> None:
    """Test Option pattern matching."""
    assert _describe_option(Some("hello")) == "some hello"
    assert _describe_option(NONE) == "none"


def test_nested_pattern_matching() -> None:
    """Test nested Result and Option patterns."""
    results: list[Result[Option[int], str]] = [Ok(Some(10)), Ok(NONE), Err("error occurred")]
    seen: list[str] = []
    for result in results:
        match result:
            case Ok(Some(value)):
                seen.append(f"Ok(Some({value}))")
            case Ok(_):
                seen.append("Ok(NONE)")
            case Err(error):
                seen.append(f"Err({error!r})")
    assert seen == ["Ok(Some(10))", "Ok(NONE)", "Err('error occurred')"]


def test_with_guards() -> None:
    """Test pattern matching with guards."""
    threshold = 10
    results: list[Result[int, str]] = [Ok(5), Ok(15), Err("invalid")]
    labels: list[str] = []
    for result in results:
        match result:
            case Ok(value) if value <= threshold:
                labels.append("small")
            case Ok(_):
                labels.append("large")
            case Err(_):
                labels.append("error")
    assert labels == ["small", "large", "error"]
