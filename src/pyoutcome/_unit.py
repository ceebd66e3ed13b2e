from __future__ import annotations

from typing import ClassVar, final


@final
class Unit:
    """Marker for "no meaningful value".

    Use it as the payload of an `Option` or a `Result` when only the variant carries information.

    There is exactly one instance, exposed as `UNIT`.

    Example:
    ```python
    >>> from pyoutcome import UNIT, Unit, Ok
    >>> Unit() is UNIT
    True
    >>> UNIT
    UNIT
    >>> str(Ok(UNIT))
    '()'

    ```
    """

    __slots__ = ()
    _instance: ClassVar[Unit | None] = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"

    def __str__(self) -> str:
        return "()"

    def __reduce__(self) -> tuple[type[Unit], tuple[()]]:
        return (Unit, ())


UNIT: Unit = Unit()
"""The single `Unit` instance."""
