import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype.claw import beartype_this_package
    if os.environ.get("NXKIT_BEARTYPE_THIS_PACKAGE", "0") == "1":
        beartype_this_package()

from .config import VERSION as __version__
from .diff import Diff, DiffItem, DiffState
from .either import Either, inl, inr
from .errors import (
    AbortError,
    MissingValueError,
    NoValueError,
    NxError,
    ShapeError,
    WrongBranchError,
)
from .option import Option, Tag, absent, faulted, from_nullable, map2, present, try_map2
from .trying import Try, attempt

__all__: list[str] = [
    "AbortError",
    "Diff",
    "DiffItem",
    "DiffState",
    "Either",
    "MissingValueError",
    "NoValueError",
    "NxError",
    "Option",
    "ShapeError",
    "Tag",
    "Try",
    "WrongBranchError",
    "__version__",
    "absent",
    "attempt",
    "faulted",
    "from_nullable",
    "inl",
    "inr",
    "map2",
    "present",
    "try_map2",
]
