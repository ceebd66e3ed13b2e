from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Concatenate, Never, cast

from .._core import Pipeable
from .._unit import UNIT, Unit
from ._errors import OptionUnwrapError

if TYPE_CHECKING:
    from typing import TypeIs

logger = logging.getLogger(__name__)


class Option[T](Pipeable, ABC):
    """A value of type `T`, or nothing.

    An `Option` is either `Some(value)` or `NONE`, and stays that way for its whole life.
    Every combinator returns a new `Option`; none of them mutates the receiver.

    Prefer `match`, `default_value` and `default_with` over `unwrap` to get the value out.
    """

    __slots__ = ()

    @staticmethod
    def from_nullable[V](value: V | None) -> Option[V]:
        """
        Builds an `Option` from a value that may be `None`.

        Args:
            value: The value, or `None`.

        Returns:
            `NONE` if value is `None`, otherwise `Some(value)`.

        Example:
            ```python
            >>> from pyoutcome import Option
            >>> Option.from_nullable({"a": 1}.get("a"))
            Some(value=1)
            >>> Option.from_nullable({"a": 1}.get("b"))
            NONE

            ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(2).is_some()
            True
            >>> NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        This is a last resort: it fails loudly on `NONE`.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyoutcome._results._errors.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises with the provided message.

        Args:
            msg: The message to include in the exception if the option is `NONE`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some("value").expect("fruits are healthy")
            'value'
            >>> NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            pyoutcome._results._errors.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        logger.debug("expect called on NONE: %s", msg)
        raise OptionUnwrapError(f"{msg} (called `expect` on a `None`)")

    def default_value(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some("car").default_value("bike")
            'car'
            >>> NONE.default_value("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def default_with(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes one from `f`.

        `f` is only called when the option is `NONE`.

        Args:
            f: A function producing the fallback value.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> k = 10
            >>> Some(4).default_with(lambda: 2 * k)
            4
            >>> NONE.default_with(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[**P, U](
        self,
        f: Callable[Concatenate[T, P], U],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving `NONE` untouched.

        Extra arguments are forwarded to `f` after the value.

        Args:
            f: The function to apply to the `Some` value.
            *args: Additional positional arguments for `f`.
            **kwargs: Additional keyword arguments for `f`.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(1653).map(str)
            Some(value='1653')
            >>> Some(2).map(pow, 10)
            Some(value=1024)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap(), *args, **kwargs))
        return NONE

    def bind[**P, U](
        self,
        f: Callable[Concatenate[T, P], Option[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[U]:
        """
        Calls a function returning an `Option` if the option is `Some`, otherwise returns `NONE`.
        Some languages call this operation flatmap or and_then.

        Args:
            f: The function to call with the `Some` value.
            *args: Additional positional arguments for `f`.
            **kwargs: Additional keyword arguments for `f`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).bind(sq).bind(sq)
            Some(value=16)
            >>> Some(2).bind(sq).bind(nope)
            NONE
            >>> NONE.bind(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap(), *args, **kwargs)
        return NONE

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """
        Exhaustively handles both variants, calling `on_some` with the value or `on_none` without argument.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(723).match(str, lambda: "nothing")
            '723'
            >>> NONE.match(str, lambda: "nothing")
            'nothing'

            ```
        """
        if self.is_some():
            return on_some(self.unwrap())
        return on_none()

    def fold[S](self, seed: S, f: Callable[[S, T], S]) -> S:
        """
        Combines the seed with the contained value, or returns the seed on `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(667).fold(110, lambda acc, x: acc + x)
            777
            >>> NONE.fold(110, lambda acc, x: acc + x)
            110

            ```
        """
        if self.is_some():
            return f(seed, self.unwrap())
        return seed

    def fold_to_option[S, U](self, seed: S, f: Callable[[S, T], U]) -> Option[U]:
        """
        Like `fold`, but keeps the result inside an `Option`: `NONE` stays `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(3).fold_to_option("x", lambda s, n: s * n)
            Some(value='xxx')
            >>> NONE.fold_to_option("x", lambda s, n: s * n)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(seed, self.unwrap()))
        return NONE

    def combine_by[W, R](self, other: Option[W], f: Callable[[W, T], R]) -> Option[R]:
        """
        Combines two options with `f` when both hold a value.

        `f` receives the value of `other` first, then the value of `self`.

        Args:
            other: The option to combine with.
            f: The combining function.

        Returns:
            `Some(f(other_value, value))` if both are `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(2).combine_by(Some("ab"), lambda s, n: s * n)
            Some(value='abab')
            >>> Some(2).combine_by(NONE, lambda s, n: s * n)
            NONE

            ```
        """
        if self.is_some() and other.is_some():
            return Some(f(other.unwrap(), self.unwrap()))
        return NONE

    def flatten[U](self: Option[Option[U]]) -> Option[U]:
        """
        Removes one level of nesting.

        An option whose value is not itself an `Option` comes back as an equal `Some`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(Some(6)).flatten()
            Some(value=6)
            >>> Some(NONE).flatten()
            NONE
            >>> Some(Some(Some(6))).flatten()
            Some(value=Some(value=6))
            >>> NONE.flatten()
            NONE

            ```
        """
        if self.is_some():
            inner = self.unwrap()
            return inner if isinstance(inner, Option) else Some(cast(U, inner))
        return NONE

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Keeps the value only if `predicate` holds for it.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(4).filter(lambda x: x % 2 == 0)
            Some(value=4)
            >>> Some(3).filter(lambda x: x % 2 == 0)
            NONE

            ```
        """
        if self.is_some():
            value = self.unwrap()
            if predicate(value):
                return Some(value)
        return NONE

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """
        Returns `True` if the option is `Some` and its value satisfies `predicate`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some(42).exists(lambda x: x > 41)
            True
            >>> NONE.exists(lambda x: x > 41)
            False

            ```
        """
        return self.is_some() and bool(predicate(self.unwrap()))

    def contains(self, value: object) -> bool:
        """
        Returns `True` if the option is `Some` and its value equals `value`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some("something").contains("something")
            True
            >>> NONE.contains("something")
            False

            ```
        """
        return self.is_some() and bool(self.unwrap() == value)

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns a copy of the option if it contains a value, otherwise calls `f` and returns its result.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some("barbarians").or_else(lambda: Some("vikings"))
            Some(value='barbarians')
            >>> NONE.or_else(lambda: Some("vikings"))
            Some(value='vikings')

            ```
        """
        return Some(self.unwrap()) if self.is_some() else f()

    def ignore(self) -> Option[Unit]:
        """
        Discards the value, keeping only the variant.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some("payload").ignore()
            Some(value=UNIT)
            >>> NONE.ignore()
            NONE

            ```
        """
        return Some(UNIT) if self.is_some() else NONE

    def for_each(self, f: Callable[[T], object]) -> None:
        """
        Calls `f` with the value for its side effects. Does nothing on `NONE`.

        Example:
            ```python
            >>> from pyoutcome import Some, NONE
            >>> Some("hello").for_each(print)
            hello
            >>> NONE.for_each(print)

            ```
        """
        if self.is_some():
            f(self.unwrap())

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.unwrap()


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> from pyoutcome import Some
    >>> Some(42)
    Some(value=42)
    >>> str(Some(42))
    '42'

    ```
    """

    value: T

    def __str__(self) -> str:
        return str(self.value)

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Use the `NONE` singleton rather than instantiating it.
    """

    def __repr__(self) -> str:
        return "NONE"

    def __str__(self) -> str:
        return "None"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        logger.debug("unwrap called on NONE")
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
