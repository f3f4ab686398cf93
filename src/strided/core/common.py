from __future__ import annotations

import functools
import numbers
import operator
from collections.abc import Iterable
from logging import getLogger
from typing import Any, Final, Literal, TypeGuard

import numpy as np

from strided.errors import InvalidExtentError

logger = getLogger(__name__)

ShapeLike = Iterable[int] | int
Extents = tuple[int, ...]
# "C" is row-major (last axis varies fastest), "F" is column-major (first axis varies fastest)
MemoryOrder = Literal["C", "F"]
MAX_RANK: Final = 7


def product(tup: tuple[int, ...]) -> int:
    return functools.reduce(operator.mul, tup, 1)


def is_integer(x: Any) -> TypeGuard[int]:
    """True if x is an integer (both pure Python or NumPy)."""
    return isinstance(x, numbers.Integral) and not is_bool(x)


def is_bool(x: Any) -> TypeGuard[bool | np.bool_]:
    """True if x is a boolean (both pure Python or NumPy)."""
    return type(x) in [bool, np.bool_]


def parse_rank(data: Any) -> int:
    if not is_integer(data):
        raise TypeError(f"Expected an integer rank. Got {data!r} instead.")
    if not 1 <= data <= MAX_RANK:
        raise ValueError(f"Expected a rank between 1 and {MAX_RANK}. Got {data} instead.")
    return int(data)


def parse_extents(data: Iterable[Any]) -> Extents:
    """
    Validate a tuple of per-axis extents.

    Axes are checked in order, and validation stops at the first axis whose extent is not
    positive; a violation on axis 1 masks any violation on later axes.

    Raises
    ------
    TypeError
        If an extent is not an integer.
    InvalidExtentError
        If an extent is zero or negative.
    """
    data_tuple = tuple(data)
    parse_rank(len(data_tuple))
    for axis, extent in enumerate(data_tuple, start=1):
        if not is_integer(extent):
            msg = f"Expected an integer extent for axis {axis}. Got {extent!r} instead."
            raise TypeError(msg)
        if extent <= 0:
            logger.error("extent of axis %d is not positive: %d", axis, extent)
            raise InvalidExtentError(axis, int(extent))
    return tuple(int(v) for v in data_tuple)


def parse_shapelike(data: ShapeLike) -> Extents:
    if isinstance(data, int):
        return parse_extents((data,))
    try:
        data_tuple = tuple(data)
    except TypeError as e:
        msg = f"Expected an integer or an iterable of integers. Got {data} instead."
        raise TypeError(msg) from e
    return parse_extents(data_tuple)
