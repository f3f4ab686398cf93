from __future__ import annotations

from typing import TYPE_CHECKING, Any

from strided.core.array import array_class_for_rank
from strided.core.common import parse_shapelike

if TYPE_CHECKING:
    import numpy.typing as npt

    from strided.core.array import StridedArray
    from strided.core.common import ShapeLike

__all__ = ["empty", "full", "zeros"]


def empty(shape: ShapeLike, *, dtype: npt.DTypeLike = "float64") -> StridedArray:
    """Create an array with the specified shape and uninitialised contents.

    Parameters
    ----------
    shape : int or tuple of int
        Extent of each axis. The number of axes selects the array class.
    dtype : npt.DTypeLike, default="float64"
        The element type.

    Returns
    -------
    StridedArray
        The new array, an instance of ``Array1D`` ... ``Array7D``.

    Notes
    -----
    The contents of an empty array are not defined until they are written.
    """
    extents = parse_shapelike(shape)
    return array_class_for_rank(len(extents))(*extents, dtype=dtype)


def full(shape: ShapeLike, fill_value: Any, *, dtype: npt.DTypeLike = "float64") -> StridedArray:
    """Create an array with every element set to ``fill_value``.

    Parameters
    ----------
    shape : int or tuple of int
        Extent of each axis.
    fill_value : scalar
        Fill value.
    dtype : npt.DTypeLike, default="float64"
        The element type.

    Returns
    -------
    StridedArray
        The new array.
    """
    extents = parse_shapelike(shape)
    return array_class_for_rank(len(extents))(*extents, dtype=dtype, fill_value=fill_value)


def zeros(shape: ShapeLike, *, dtype: npt.DTypeLike = "float64") -> StridedArray:
    """Create an array with every element set to zero."""
    return full(shape, 0, dtype=dtype)
