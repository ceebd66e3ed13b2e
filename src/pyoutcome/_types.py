from typing import Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    """Anything that can render itself as a human readable description.

    This is the only capability a `Result` failure payload must provide.
    Exceptions, strings and most user types qualify.
    """

    def __str__(self) -> str: ...
