from typing import Any

import hypothesis.strategies as st

from strided.core.common import MAX_RANK, MemoryOrder

# keep the element count of a rank 7 array small enough to enumerate
MAX_EXTENT = 3

ranks = st.integers(min_value=1, max_value=MAX_RANK)
orders: st.SearchStrategy[MemoryOrder] = st.sampled_from(["C", "F"])
dtypes = st.sampled_from(["int64", "float64", "complex128", "object"])


@st.composite
def extents(
    draw: st.DrawFn, *, rank: int | None = None, max_extent: int = MAX_EXTENT
) -> tuple[int, ...]:
    if rank is None:
        rank = draw(ranks)
    return tuple(
        draw(st.lists(st.integers(1, max_extent), min_size=rank, max_size=rank))
    )


@st.composite
def coordinates(draw: st.DrawFn, *, shape: tuple[int, ...]) -> tuple[int, ...]:
    """A valid coordinate tuple for an array of the given shape."""
    return tuple(draw(st.integers(0, e - 1)) for e in shape)


@st.composite
def invalid_extents(draw: st.DrawFn) -> tuple[tuple[int, ...], int]:
    """
    Extents with at least one non-positive entry, and the axis (1-based) of the first one.
    """
    shape = list(draw(extents()))
    axis = draw(st.integers(0, len(shape) - 1))
    shape[axis] = draw(st.integers(max_value=0))
    for i in range(axis + 1, len(shape)):
        shape[i] = draw(st.integers(max_value=MAX_EXTENT))
    return tuple(shape), axis + 1


@st.composite
def out_of_range_coordinates(
    draw: st.DrawFn, *, shape: tuple[int, ...]
) -> tuple[tuple[int, ...], int]:
    """
    Coordinates whose first out of range entry is on the returned axis (1-based).
    """
    coords: list[Any] = list(draw(coordinates(shape=shape)))
    axis = draw(st.integers(0, len(shape) - 1))
    coords[axis] = draw(st.integers(max_value=-1) | st.integers(min_value=shape[axis]))
    for i in range(axis + 1, len(shape)):
        coords[i] = draw(st.integers(-MAX_EXTENT, 2 * MAX_EXTENT))
    return tuple(coords), axis + 1
