from __future__ import annotations

import io
from contextlib import redirect_stdout

import numpy as np
import pytest

import strided
from strided import Array1D, Array3D, InvalidExtentError, empty, full, zeros


def test_empty() -> None:
    a = empty((2, 3, 4), dtype="int16")
    assert isinstance(a, Array3D)
    assert a.shape == (2, 3, 4)
    assert a.dtype == np.dtype("int16")


def test_empty_int_shape() -> None:
    a = empty(5)
    assert isinstance(a, Array1D)
    assert a.length1() == 5


def test_zeros_and_full() -> None:
    z = zeros((2, 2))
    assert all(z[c] == 0 for c in z.coordinates())
    f = full((3,), 2.5)
    assert [f[i] for i in range(3)] == [2.5, 2.5, 2.5]


@pytest.mark.parametrize("shape", [(), (1,) * 8])
def test_unsupported_rank(shape: tuple[int, ...]) -> None:
    with pytest.raises(ValueError, match="Expected a rank between 1 and 7"):
        empty(shape)


def test_invalid_shape() -> None:
    with pytest.raises(InvalidExtentError):
        zeros((2, 0))


def test_print_debug_info() -> None:
    out = io.StringIO()
    with redirect_stdout(out):
        strided.print_debug_info()
    assert f"strided: {strided.__version__}" in out.getvalue()
    assert "numpy:" in out.getvalue()
