from ._errors import OptionUnwrapError, ResultUnwrapError, UnwrapError
from ._option import NONE, NoneOption, Option, Some
from ._result import Err, Ok, Result, safe

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Some",
    "UnwrapError",
    "safe",
]
