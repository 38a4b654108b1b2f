"""
Exception hierarchy for nxkit.

Everything a caller may reasonably catch derives from `NxError`. `AbortError`
is the single exception that does not: it derives from `BaseException` so that
capture boundaries and ordinary `except Exception` handlers never swallow it.
"""


class NxError(Exception):
    """Base class for all recoverable nxkit errors."""


class NoValueError(NxError, LookupError):
    """Raised when a value is demanded from a container that holds none."""


class MissingValueError(NoValueError):
    """Synthetic fault recorded when an absent value blocks a computation."""


class WrongBranchError(NoValueError):
    """Raised when the unpopulated branch of an `Either` is accessed."""

    def __init__(self, populated: str, payload: object):
        self.populated = populated
        self.payload_type = type(payload).__name__
        super().__init__(f"This is {populated}<{self.payload_type}>.")


class ShapeError(NxError, ValueError):
    """Raised when paired sequences do not have the same length."""


class AbortError(BaseException):
    """Fatal escalation raised by `Try.abort` and `Try.abort_when`.

    The aborted error is always available as `__cause__` and as `.error`.
    """

    def __init__(self, error: BaseException):
        super().__init__(f"Aborted by Try.abort: {error!r}")
        self.error = error


__all__ = [
    "AbortError",
    "MissingValueError",
    "NoValueError",
    "NxError",
    "ShapeError",
    "WrongBranchError",
]
