"""Location enums and split results shared by all partitioning code.

- HyperplaneLocation: side of a hyperplane a point lies on
- RegionLocation: position of a point relative to a region
- SplitLocation: where a split object ended up relative to a splitter
- RegionCutRule: how leaf locations are assigned when a leaf is cut
- Split: the minus and plus parts of a split operation
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


class HyperplaneLocation(Enum):
    """Location of a point relative to an oriented hyperplane.

    The minus side of a great circle is the hemisphere containing its pole.
    """

    MINUS = auto()
    PLUS = auto()
    ON = auto()


class RegionLocation(Enum):
    """Location of a point relative to a region."""

    INSIDE = auto()
    OUTSIDE = auto()
    BOUNDARY = auto()


class SplitLocation(Enum):
    """Location of a split object relative to the splitter.

    - MINUS: the object lies entirely on the minus side
    - PLUS: the object lies entirely on the plus side
    - BOTH: the object was cut into a minus part and a plus part
    - NEITHER: the object lies directly on the splitter
    """

    MINUS = auto()
    PLUS = auto()
    BOTH = auto()
    NEITHER = auto()


class RegionCutRule(Enum):
    """Rule for setting the locations of the children of a newly cut leaf."""

    MINUS_INSIDE = auto()
    PLUS_INSIDE = auto()
    INHERIT = auto()


@dataclass(frozen=True, slots=True)
class Split(Generic[T]):
    """Result of splitting an object with a hyperplane.

    Either part may be None. The location is derived from which parts
    are present.

    Attributes:
        minus: Part of the object on the minus side of the splitter
        plus: Part of the object on the plus side of the splitter
    """

    minus: T | None = None
    plus: T | None = None

    @property
    def location(self) -> SplitLocation:
        """Location of the split object relative to the splitter."""
        if self.minus is not None:
            return SplitLocation.BOTH if self.plus is not None else SplitLocation.MINUS
        if self.plus is not None:
            return SplitLocation.PLUS
        return SplitLocation.NEITHER

    def __repr__(self) -> str:
        return f"Split[location= {self.location.name}, minus= {self.minus}, plus= {self.plus}]"
