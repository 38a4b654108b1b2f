import operator
from collections.abc import Callable


def normalizing_comparer(
    *, ignore_case: bool = False, ignore_whitespace: bool = False
) -> Callable[[str, str], bool]:
    """Build a line comparer that optionally ignores case and whitespace runs."""
    if not ignore_case and not ignore_whitespace:
        return operator.eq

    def normalize(line: str) -> str:
        if ignore_whitespace:
            line = " ".join(line.split())
        if ignore_case:
            line = line.casefold()
        return line

    def compare(old: str, new: str) -> bool:
        return normalize(old) == normalize(new)

    return compare


__all__ = ["normalizing_comparer"]
