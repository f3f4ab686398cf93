from __future__ import annotations

import itertools
import operator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strided.core.common import product
from strided.core.config import parse_indexing_order
from strided.core.indexing import check_coordinates

if TYPE_CHECKING:
    from collections.abc import Sequence

    from strided.core.common import Extents, MemoryOrder


def ascending_strides(extents: Extents) -> Extents:
    """
    Strides for the column-major ("F") convention, where axis 1 varies fastest.

    The stride of axis ``i`` is the product of the extents of all axes before it.

    Examples
    --------
    >>> ascending_strides((2, 3, 4))
    (1, 2, 6)
    """
    return tuple(itertools.accumulate(extents[:-1], operator.mul, initial=1))


def descending_strides(extents: Extents) -> Extents:
    """
    Strides for the row-major ("C") convention, where the last axis varies fastest.

    The stride of axis ``i`` is the product of the extents of all axes after it.

    Examples
    --------
    >>> descending_strides((2, 3, 4))
    (12, 4, 1)
    """
    return ascending_strides(extents[::-1])[::-1]


@dataclass(frozen=True)
class ArrayLayout:
    """
    Per-axis metadata of a strided array: the extents and both stride tables.

    Attributes
    ----------
    extents : tuple[int, ...]
        The number of valid coordinates along each axis.
    order : Literal["C", "F"]
        The active addressing convention.
    ascending : tuple[int, ...]
        Strides for the column-major convention.
    descending : tuple[int, ...]
        Strides for the row-major convention.
    strides : tuple[int, ...]
        The stride table selected by ``order``.
    size : int
        The number of elements, i.e. the product of the extents.
    """

    extents: Extents
    order: MemoryOrder
    ascending: Extents = field(init=False)
    descending: Extents = field(init=False)
    strides: Extents = field(init=False)
    size: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", parse_indexing_order(self.order))
        object.__setattr__(self, "ascending", ascending_strides(self.extents))
        object.__setattr__(self, "descending", descending_strides(self.extents))
        object.__setattr__(
            self, "strides", self.descending if self.order == "C" else self.ascending
        )
        object.__setattr__(self, "size", product(self.extents))

    @property
    def rank(self) -> int:
        return len(self.extents)

    def offset(self, coords: Sequence[int]) -> int:
        # no validation, out of range coordinates yield an arbitrary offset
        return sum(map(operator.mul, coords, self.strides))

    def checked_offset(self, coords: Sequence[int]) -> int:
        check_coordinates(coords, self.extents)
        return sum(map(operator.mul, coords, self.strides))
