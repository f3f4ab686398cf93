from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, ClassVar

from strided.core.common import parse_extents, parse_rank
from strided.core.config import get_addressing
from strided.core.indexing import err_wrong_number_of_coordinates, iter_coordinates
from strided.core.layout import ArrayLayout
from strided.errors import ReadOnlyElementError
from strided.registry import get_buffer_class

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence
    from types import TracebackType
    from typing import Self

    import numpy as np
    import numpy.typing as npt

    from strided.core.buffer import Buffer
    from strided.core.common import Extents, MemoryOrder

__all__ = [
    "Array1D",
    "Array2D",
    "Array3D",
    "Array4D",
    "Array5D",
    "Array6D",
    "Array7D",
    "ElementRef",
    "StridedArray",
    "array_class_for_rank",
]


class ElementRef:
    """
    A handle on a single element of a strided array.

    The handle stores the linear offset of the element, never its value: every read goes
    to the array's buffer, so writes made through any other handle or through item
    assignment on the array are visible. Once the array is released, reads and writes
    raise :class:`strided.errors.ArrayReleasedError`.
    """

    __slots__ = ("_array", "_offset", "_read_only")

    def __init__(self, array: StridedArray, offset: int, *, read_only: bool = False) -> None:
        self._array = array
        self._offset = offset
        self._read_only = read_only

    @property
    def read_only(self) -> bool:
        return self._read_only

    def get(self) -> Any:
        return self._array._buffer[self._offset]

    def set(self, value: Any) -> None:
        if self._read_only:
            raise ReadOnlyElementError("cannot write through a read-only element reference")
        self._array._buffer[self._offset] = value

    @property
    def value(self) -> Any:
        return self.get()

    @value.setter
    def value(self, value: Any) -> None:
        self.set(value)

    def __repr__(self) -> str:
        mode = "read-only" if self._read_only else "writable"
        return f"<ElementRef offset={self._offset} {mode}>"


class StridedArray:
    """
    A dense N-dimensional array of rank 1 to 7 stored in one contiguous buffer.

    Elements are addressed by one integer coordinate per axis. The coordinates are mapped
    to a linear offset with a stride table that is computed once, at construction, for
    the addressing convention in effect (``array.order`` in :data:`strided.config`):
    "C" (row-major, last axis varies fastest) or "F" (column-major, first axis varies
    fastest). Whether coordinates are validated is decided the same way
    (``array.bounds_check``). Both choices are frozen into the array.

    Parameters
    ----------
    *extents : int
        The number of valid coordinates along each axis, in axis order. All must be
        positive.
    dtype : npt.DTypeLike, default="float64"
        The element type.
    fill_value : Any, optional
        Initial value of every element. The buffer is left uninitialised if None.

    Raises
    ------
    InvalidExtentError
        If an extent is not positive. Axes are checked in order and only the first
        offending axis is reported.

    Notes
    -----
    The array owns its buffer exclusively and cannot be copied or pickled. The buffer is
    released exactly once: by :meth:`release`, when leaving a ``with`` block, or when the
    array is garbage collected, whichever happens first.
    """

    _fixed_rank: ClassVar[int | None] = None

    _layout: ArrayLayout
    _buffer: Buffer
    _bounds_check: bool
    _offset: Callable[[Sequence[int]], int]

    def __init__(
        self,
        *extents: int,
        dtype: npt.DTypeLike = "float64",
        fill_value: Any | None = None,
    ) -> None:
        if self._fixed_rank is not None and len(extents) != self._fixed_rank:
            raise TypeError(
                f"{type(self).__name__} takes {self._fixed_rank} extents, got {len(extents)}"
            )
        addressing = get_addressing()
        layout = ArrayLayout(parse_extents(extents), addressing.order)
        buffer = get_buffer_class().create(layout.size, dtype, fill_value)

        self._layout = layout
        self._bounds_check = addressing.bounds_check
        self._offset = layout.checked_offset if addressing.bounds_check else layout.offset
        self._dtype = buffer.dtype
        self._buffer = buffer
        self._finalizer = weakref.finalize(self, buffer.release)

    @property
    def shape(self) -> Extents:
        return self._layout.extents

    @property
    def rank(self) -> int:
        return self._layout.rank

    @property
    def size(self) -> int:
        return self._layout.size

    @property
    def strides(self) -> Extents:
        """The strides of the active addressing convention, in elements."""
        return self._layout.strides

    @property
    def order(self) -> MemoryOrder:
        return self._layout.order

    @property
    def bounds_check(self) -> bool:
        return self._bounds_check

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._dtype

    @property
    def released(self) -> bool:
        return not self._finalizer.alive

    def length(self, axis: int) -> int:
        """
        The extent of an axis.

        Parameters
        ----------
        axis : int
            The axis number, starting at 1.
        """
        if not 1 <= axis <= self.rank:
            raise ValueError(f"axis must be between 1 and {self.rank}, got {axis}")
        return self._layout.extents[axis - 1]

    def offset(self, *coords: int) -> int:
        """
        The position in the buffer of the element at ``coords``.

        Coordinates are validated only if the array was built with bounds checking.
        """
        if len(coords) != self._layout.rank:
            err_wrong_number_of_coordinates(coords, self._layout.rank)
        return self._offset(coords)

    def at(self, *coords: int, read_only: bool = False) -> ElementRef:
        """
        Return a handle on the element at ``coords``.

        Parameters
        ----------
        *coords : int
            One coordinate per axis.
        read_only : bool, default=False
            Return a handle that refuses writes.

        Raises
        ------
        IndexOutOfRangeError
            With bounds checking, if a coordinate is outside its axis.
        """
        return ElementRef(self, self.offset(*coords), read_only=read_only)

    def coordinates(self) -> Iterator[tuple[int, ...]]:
        """Iterate over all valid coordinate tuples in buffer order."""
        return iter_coordinates(self._layout.extents, self._layout.order)

    def release(self) -> None:
        """Release the buffer. Calling this more than once has no further effect."""
        self._finalizer()

    def _coords(self, key: Any) -> tuple[int, ...]:
        coords = key if isinstance(key, tuple) else (key,)
        if len(coords) != self._layout.rank:
            err_wrong_number_of_coordinates(coords, self._layout.rank)
        return coords

    def __getitem__(self, key: Any) -> Any:
        return self._buffer[self._offset(self._coords(key))]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._buffer[self._offset(self._coords(key))] = value

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.release()

    def __copy__(self) -> Self:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __repr__(self) -> str:
        state = " released" if self.released else ""
        return (
            f"<{type(self).__name__} shape={self.shape} dtype={self.dtype} "
            f"order={self.order!r}{state}>"
        )


def _axis_length(axis: int) -> Callable[[StridedArray], int]:
    def length(self: StridedArray) -> int:
        return self._layout.extents[axis - 1]

    length.__name__ = length.__qualname__ = f"length{axis}"
    length.__doc__ = f"The extent of axis {axis}."
    return length


class Array1D(StridedArray):
    _fixed_rank = 1
    length1 = _axis_length(1)


class Array2D(StridedArray):
    _fixed_rank = 2
    length1 = _axis_length(1)
    length2 = _axis_length(2)


class Array3D(StridedArray):
    _fixed_rank = 3
    length1 = _axis_length(1)
    length2 = _axis_length(2)
    length3 = _axis_length(3)


class Array4D(StridedArray):
    _fixed_rank = 4
    length1 = _axis_length(1)
    length2 = _axis_length(2)
    length3 = _axis_length(3)
    length4 = _axis_length(4)


class Array5D(StridedArray):
    _fixed_rank = 5
    length1 = _axis_length(1)
    length2 = _axis_length(2)
    length3 = _axis_length(3)
    length4 = _axis_length(4)
    length5 = _axis_length(5)


class Array6D(StridedArray):
    _fixed_rank = 6
    length1 = _axis_length(1)
    length2 = _axis_length(2)
    length3 = _axis_length(3)
    length4 = _axis_length(4)
    length5 = _axis_length(5)
    length6 = _axis_length(6)


class Array7D(StridedArray):
    _fixed_rank = 7
    length1 = _axis_length(1)
    length2 = _axis_length(2)
    length3 = _axis_length(3)
    length4 = _axis_length(4)
    length5 = _axis_length(5)
    length6 = _axis_length(6)
    length7 = _axis_length(7)


_RANK_CLASSES: dict[int, type[StridedArray]] = {
    cls._fixed_rank: cls  # type: ignore[misc]
    for cls in (Array1D, Array2D, Array3D, Array4D, Array5D, Array6D, Array7D)
}


def array_class_for_rank(rank: int) -> type[StridedArray]:
    """Return the fixed-rank array class for ``rank``."""
    return _RANK_CLASSES[parse_rank(rank)]
