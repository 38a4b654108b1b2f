"""
Conversions between nxkit containers and `returns` containers.
"""

from returns.maybe import Maybe, Nothing, Some
from returns.result import Failure, Result, Success

from .errors import MissingValueError
from .option import Option, Tag, absent, from_result, present
from .trying import Try
from .trying import from_result as try_from_result


def to_maybe[T](option: Option[T]) -> Maybe[T]:
    """`Some` for a present value; Absent and Faulted both become `Nothing`."""
    return Some(option.payload) if option.is_present() else Nothing


def from_maybe[T](maybe: Maybe[T]) -> Option[T]:
    return maybe.map(present).value_or(absent())


def to_result[T](container: Option[T] | Try[T]) -> Result[T, Exception]:
    """Convert to a `returns` Result.

    Absent options become a `Failure` holding a `MissingValueError`.
    """
    if isinstance(container, Try):
        return Success(container.payload) if container.is_success() else Failure(container.error)
    match container.tag:
        case Tag.PRESENT:
            return Success(container.payload)
        case Tag.FAULTED:
            return Failure(container.fault)
        case _:
            return Failure(MissingValueError("value is absent"))


__all__ = ["from_maybe", "from_result", "to_maybe", "to_result", "try_from_result"]
