from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Any, Concatenate, Never, cast, overload

from .._core import Pipeable
from .._types import Describable
from .._unit import UNIT, Unit
from ._errors import ResultUnwrapError
from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from typing import TypeIs

logger = logging.getLogger(__name__)


class Result[T, E: Describable](Pipeable, ABC):
    """A computation that either succeeded with a value of type `T` or failed with a payload of type `E`.

    The failure payload can be anything that renders itself through `str()`.

    Every short-circuiting combinator forwards the first `Err` it meets with the very same payload object,
    and never calls the supplied function on it.
    """

    __slots__ = ()

    @staticmethod
    def from_pair[V, X: Describable](value: V, error: X | None) -> Result[V, X]:
        """
        Builds a `Result` from a `(value, error)` pair.

        Args:
            value: The value to wrap when there is no error.
            error: The failure payload, or `None`.

        Returns:
            `Err(error)` if error is not `None`, otherwise `Ok(value)`.

        Example:
            ```python
            >>> from pyoutcome import Result
            >>> Result.from_pair(586, None)
            Ok(value=586)
            >>> Result.from_pair(0, "oops")
            Err(error='oops')

            ```
        """
        if error is not None:
            return Err(error)
        return Ok(value)

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(420).unwrap()
            420
            >>> Err("its about to get real bad").unwrap()
            Traceback (most recent call last):
                ...
            pyoutcome._results._errors.ResultUnwrapError: called `unwrap` on Err: 'its about to get real bad'

            ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Err("boom").unwrap_err()
            'boom'
            >>> Ok(1).unwrap_err()
            Traceback (most recent call last):
                ...
            pyoutcome._results._errors.ResultUnwrapError: called `unwrap_err` on Ok

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.
        """
        if self.is_ok():
            return self.unwrap()
        logger.debug("expect called on Err: %s", msg)
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Args:
            msg: The message to display if the result is Ok.

        Raises:
            ResultUnwrapError: If the result is Ok, with the provided message and value.
        """
        if self.is_err():
            return self.unwrap_err()
        logger.debug("expect_err called on Ok: %s", msg)
        raise ResultUnwrapError(f"{msg}: expected Err, got Ok({self.unwrap()!r})")

    def default_value(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(357).default_value(42)
            357
            >>> Err("error").default_value(42)
            42

            ```
        """
        return self.unwrap() if self.is_ok() else default

    def default_with(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes one from the error.

        Args:
            f: Callable that takes the Err value and returns a T. Only called on Err.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(357).default_with(len)
            357
            >>> Err("error").default_with(len)
            5

            ```
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[**P, U](
        self,
        f: Callable[Concatenate[T, P], U],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Args:
            f: Callable to apply to the Ok value.
            *args: Additional positional arguments for `f`.
            **kwargs: Additional keyword arguments for `f`.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise Err(error) with the same error.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(42).map(str)
            Ok(value='42')
            >>> Err("nope").map(str)
            Err(error='nope')

            ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap(), *args, **kwargs))
        return Err(self.unwrap_err())

    def map_err[F: Describable](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Err("something failed").map_err(lambda e: f"oh no {e}")
            Err(error='oh no something failed')
            >>> Ok("something").map_err(lambda e: f"oh no {e}")
            Ok(value='something')

            ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return Ok(self.unwrap())

    def bind[**P, U](
        self,
        f: Callable[Concatenate[T, P], Result[U, E]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns the Err unchanged.

        Args:
            f: Callable that takes the Ok value and returns a Result.
            *args: Additional positional arguments for `f`.
            **kwargs: Additional keyword arguments for `f`.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(42).bind(lambda v: Ok(str(v)))
            Ok(value='42')
            >>> Ok(-1).bind(lambda v: Ok(v) if v > 0 else Err("negative"))
            Err(error='negative')

            ```
        """
        if self.is_ok():
            return f(self.unwrap(), *args, **kwargs)
        return Err(self.unwrap_err())

    def or_else(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """
        Calls f with the error if the result is Err, otherwise returns the Ok.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Err("e").or_else(lambda e: Ok(len(e)))
            Ok(value=1)
            >>> Ok(5).or_else(lambda e: Ok(len(e)))
            Ok(value=5)

            ```
        """
        return Ok(self.unwrap()) if self.is_ok() else f(self.unwrap_err())

    def match[R](self, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
        """
        Exhaustively handles both variants, calling `on_ok` with the value or `on_err` with the error.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(42).match(str, lambda e: f"failed: {e}")
            '42'
            >>> Err(ValueError("bad input")).match(str, lambda e: f"failed: {e}")
            'failed: bad input'

            ```
        """
        if self.is_ok():
            return on_ok(self.unwrap())
        return on_err(self.unwrap_err())

    def fold[S](self, seed: S, f: Callable[[S, T], S]) -> S:
        """
        Combines the seed with the Ok value, or returns the seed on Err.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(667).fold(110, lambda acc, x: acc + x)
            777
            >>> Err("error").fold(110, lambda acc, x: acc + x)
            110

            ```
        """
        if self.is_ok():
            return f(seed, self.unwrap())
        return seed

    def fold_to_result[S, U](self, seed: S, f: Callable[[S, T], U]) -> Result[U, E]:
        """
        Like `fold`, but keeps the result inside a `Result`: an Err is forwarded.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(3).fold_to_result("x", lambda s, n: s * n)
            Ok(value='xxx')
            >>> Err("e").fold_to_result("x", lambda s, n: s * n)
            Err(error='e')

            ```
        """
        if self.is_ok():
            return Ok(f(seed, self.unwrap()))
        return Err(self.unwrap_err())

    def combine_by[W, R](
        self, other: Result[W, E], f: Callable[[W, T], R]
    ) -> Result[R, E]:
        """
        Combines two results with `f` when both are Ok.

        `f` receives the value of `other` first, then the value of `self`.
        When both are Err, the error of `self` wins.

        Args:
            other: The result to combine with.
            f: The combining function.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(42).combine_by(Ok("nice"), lambda s, i: s == "nice" or i == 42)
            Ok(value=True)
            >>> Err("first").combine_by(Err("second"), lambda s, i: (s, i))
            Err(error='first')
            >>> Ok(1).combine_by(Err("second"), lambda s, i: (s, i))
            Err(error='second')

            ```
        """
        if self.is_err():
            return Err(self.unwrap_err())
        if other.is_err():
            return Err(other.unwrap_err())
        return Ok(f(other.unwrap(), self.unwrap()))

    def flatten[U](self: Result[Result[U, E], E]) -> Result[U, E]:
        """
        Removes one level of nesting.

        A result whose Ok value is not itself a `Result` comes back as an equal `Ok`.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(Ok(1)).flatten()
            Ok(value=1)
            >>> Ok(Err("inner")).flatten()
            Err(error='inner')
            >>> Err("outer").flatten()
            Err(error='outer')

            ```
        """
        if self.is_ok():
            inner = self.unwrap()
            return inner if isinstance(inner, Result) else Ok(cast(U, inner))
        return Err(self.unwrap_err())

    def filter(
        self, predicate: Callable[[T], bool], on_reject: Callable[[T], E]
    ) -> Result[T, E]:
        """
        Keeps the Ok value only if `predicate` holds for it.

        A rejected value is turned into an Err built by `on_reject`, an Err is forwarded unchanged.

        Example:
            ```python
            >>> from pyoutcome import Ok
            >>> Ok(4).filter(lambda x: x % 2 == 0, lambda x: f"{x} is odd")
            Ok(value=4)
            >>> Ok(3).filter(lambda x: x % 2 == 0, lambda x: f"{x} is odd")
            Err(error='3 is odd')

            ```
        """
        if self.is_err():
            return Err(self.unwrap_err())
        value = self.unwrap()
        if predicate(value):
            return Ok(value)
        return Err(on_reject(value))

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """
        Returns True if the result is Ok and its value satisfies `predicate`.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(42).exists(lambda x: x > 41)
            True
            >>> Err("error").exists(lambda x: x > 41)
            False

            ```
        """
        return self.is_ok() and bool(predicate(self.unwrap()))

    def contains(self, value: object) -> bool:
        """
        Returns True if the result is Ok and its value equals `value`.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok("something").contains("something")
            True
            >>> Err("error").contains("error")
            False

            ```
        """
        return self.is_ok() and bool(self.unwrap() == value)

    def ignore(self) -> Result[Unit, E]:
        """
        Discards the Ok value, keeping errors as they are.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok("payload").ignore()
            Ok(value=UNIT)
            >>> Err("e").ignore()
            Err(error='e')

            ```
        """
        if self.is_ok():
            return Ok(UNIT)
        return Err(self.unwrap_err())

    def for_each(self, f: Callable[[T], object]) -> None:
        """
        Calls `f` with the Ok value for its side effects. Does nothing on Err.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok("hello").for_each(print)
            hello
            >>> Err("e").for_each(print)

            ```
        """
        if self.is_ok():
            f(self.unwrap())

    def __iter__(self) -> Iterator[T]:
        if self.is_ok():
            yield self.unwrap()

    def to_option(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE.

        The error is discarded.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Ok(146).to_option()
            Some(value=146)
            >>> Err("error").to_option()
            NONE

            ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """
        Converts the Result into an Option of its error, mapping Err(e) to Some(e) and Ok(v) to NONE.

        Example:
            ```python
            >>> from pyoutcome import Ok, Err
            >>> Err("error").err()
            Some(value='error')
            >>> Ok(1).err()
            NONE

            ```
        """
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True, frozen=True)
class Ok[T, E: Describable](Result[T, E]):
    """Represents a successful value."""

    value: T

    def __str__(self) -> str:
        return str(self.value)

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        logger.debug("unwrap_err called on Ok(%r)", self.value)
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True, frozen=True)
class Err[T, E: Describable](Result[T, E]):
    """Represents a failure.

    Rendering an Err with `str()` gives the error's own description, verbatim.

    Example:
    ```python
    >>> from pyoutcome import Err
    >>> str(Err(ValueError("hello from the other side")))
    'hello from the other side'

    ```
    """

    error: E

    def __str__(self) -> str:
        return str(self.error)

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        logger.debug("unwrap called on Err(%r)", self.error)
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error


@overload
def safe[**P, T](fn: Callable[P, T], /) -> Callable[P, Result[T, Exception]]: ...
@overload
def safe[**P, T, X: BaseException](
    fn: Callable[P, T], /, *, exceptions: tuple[type[X], ...]
) -> Callable[P, Result[T, X]]: ...
@overload
def safe[**P, T, X: BaseException](
    *, exceptions: tuple[type[X], ...]
) -> Callable[[Callable[P, T]], Callable[P, Result[T, X]]]: ...
def safe(
    fn: Callable[..., Any] | None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Any:
    """Wrap a function so that it returns a `Result` instead of raising.

    This is the python counterpart of the `(value, error)` return convention:
    a raised exception listed in `exceptions` becomes `Err(exc)`, a returned value becomes `Ok(value)`.
    Other exceptions propagate.

    Args:
        fn: The function to wrap, when used as a bare decorator.
        exceptions: Exception types to capture. Defaults to `(Exception,)`.

    Returns:
        The wrapped function, or a decorator when called with keyword arguments only.

    Example:
    ```python
    >>> from pyoutcome import safe
    >>> @safe(exceptions=(ZeroDivisionError,))
    ... def divide(a: float, b: float) -> float:
    ...     return a / b
    >>> divide(10, 4)
    Ok(value=2.5)
    >>> divide(1, 0).map_err(str)
    Err(error='division by zero')

    ```
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Result[Any, Any]]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
            try:
                return Ok(func(*args, **kwargs))
            except exceptions as exc:
                logger.debug("%r raised %r", func, exc)
                return Err(exc)

        return wrapper

    if fn is None:
        return decorator
    return decorator(fn)
