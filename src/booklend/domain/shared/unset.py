"""Marker for fields omitted from a partial update."""

from enum import Enum
from typing import TypeVar, Union

T = TypeVar("T")


class Unset(Enum):
    """Single-member enum so that ``UNSET`` survives ``is`` checks and typing."""

    UNSET = "UNSET"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET

# A value that may be omitted entirely, explicitly cleared with None, or set.
Patch = Union[T, None, Unset]
