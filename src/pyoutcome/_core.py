from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R` by passing the container itself to `func`.

        `x.into(f)` reads left to right where `f(x)` would not, which keeps a chain of combinators flat.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function receiving the container as first argument.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> from pyoutcome import Some, NONE, Option
        >>> def describe(opt: Option[int], unit: str) -> str:
        ...     return opt.match(lambda v: f"{v} {unit}", lambda: "unknown")
        >>> Some(3).map(lambda x: x * 2).into(describe, "km")
        '6 km'
        >>> NONE.into(describe, "km")
        'unknown'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the container to a function for its side effects, then return it unchanged.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to call with the container.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The same instance, for chaining.

        Example:
        ```python
        >>> from pyoutcome import Ok
        >>> Ok(2).inspect(print).map(lambda x: x + 1)
        2
        Ok(value=3)

        ```
        """
        func(self, *args, **kwargs)
        return self
