import logging

from ._core import Pipeable
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
    UnwrapError,
    safe,
)
from ._types import Describable
from ._unit import UNIT, Unit

__all__ = [
    "NONE",
    "UNIT",
    "Describable",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Some",
    "Unit",
    "UnwrapError",
    "safe",
]

# Silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
