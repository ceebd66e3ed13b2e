class UnwrapError(RuntimeError):
    """Base class for errors raised when a container is unwrapped in the wrong state."""


class OptionUnwrapError(UnwrapError):
    """Raised when the value of an empty `Option` is requested."""


class ResultUnwrapError(UnwrapError):
    """Raised when a `Result` is unwrapped on the variant that does not hold the requested payload."""
