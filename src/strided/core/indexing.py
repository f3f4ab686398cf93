from __future__ import annotations

import itertools
from logging import getLogger
from typing import TYPE_CHECKING

from strided.core.common import is_integer
from strided.errors import IndexOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from strided.core.common import Extents, MemoryOrder

logger = getLogger(__name__)


def err_wrong_number_of_coordinates(coords: Sequence[object], rank: int) -> None:
    raise TypeError(f"expected {rank} coordinates for a rank {rank} array, got {len(coords)}")


def check_coordinates(coords: Sequence[int], extents: Extents) -> None:
    """
    Validate each coordinate against the extent of its axis.

    Axes are checked in order and the first violation is raised.

    Raises
    ------
    TypeError
        If a coordinate is not an integer.
    IndexOutOfRangeError
        If a coordinate is negative or not less than the extent of its axis.
    """
    for axis, (x, extent) in enumerate(zip(coords, extents, strict=True), start=1):
        if not is_integer(x):
            raise TypeError(f"Expected an integer coordinate for axis {axis}. Got {x!r} instead.")
        if x < 0 or x >= extent:
            logger.error("index %d is out of bounds for axis %d with length %d", x, axis, extent)
            raise IndexOutOfRangeError(axis, int(x), extent)


def iter_coordinates(extents: Extents, order: MemoryOrder = "C") -> Iterator[tuple[int, ...]]:
    """
    Iterate over every valid coordinate tuple of an array in buffer order.

    Parameters
    ----------
    extents : tuple[int, ...]
        The extent of each axis.
    order : Literal["C", "F"], default="C"
        With "C" the last axis varies fastest, with "F" the first axis does.

    Examples
    --------
    >>> tuple(iter_coordinates((2, 3)))
    ((0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2))

    >>> tuple(iter_coordinates((2, 3), order="F"))
    ((0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2))
    """
    if order == "C":
        yield from itertools.product(*(range(e) for e in extents))
    elif order == "F":
        for coords in itertools.product(*(range(e) for e in reversed(extents))):
            yield coords[::-1]
    else:
        msg = f"Indexing order {order} is not supported."  # type: ignore[unreachable]
        raise ValueError(msg)
