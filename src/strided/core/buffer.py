from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt

from strided.errors import ArrayReleasedError
from strided.registry import register_buffer

if TYPE_CHECKING:
    from typing import Self

logger = getLogger(__name__)


class Buffer:
    """A flat contiguous block of elements

    A Buffer is the storage behind a single strided array, which holds the only
    reference to it. It is backed by a 1-dimensional, contiguous numpy array whose
    length is fixed at creation.

    Notes
    -----
    Indexing is by linear offset. Offsets are not validated here beyond what numpy
    itself does; coordinate validation belongs to the array.

    Parameters
    ----------
    array_like
        numpy array that must be 1-dim and contiguous.
    """

    _data: npt.NDArray[Any] | None

    def __init__(self, array_like: npt.NDArray[Any]) -> None:
        if array_like.ndim != 1:
            raise ValueError("array_like: only 1-dim allowed")
        if not array_like.flags.contiguous:
            raise ValueError("array_like: only contiguous memory allowed")
        self._data = array_like

    @classmethod
    def create(cls, size: int, dtype: npt.DTypeLike, fill_value: Any | None = None) -> Self:
        """Allocate a new buffer of ``size`` elements

        Parameters
        ----------
        size
            number of elements
        dtype
            element type
        fill_value
            value every element is set to; the contents are left uninitialised when None

        Returns
        -------
            A new buffer
        """
        if fill_value is None:
            data = np.empty(size, dtype=dtype)
        else:
            data = np.full(size, fill_value, dtype=dtype)
        logger.debug("allocated buffer of %d elements of %s", size, data.dtype)
        return cls(data)

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._require().dtype

    @property
    def released(self) -> bool:
        return self._data is None

    def release(self) -> None:
        """Drop the backing memory. The buffer cannot be used afterwards."""
        if self._data is not None:
            logger.debug("released buffer of %d elements", len(self._data))
        self._data = None

    def _require(self) -> npt.NDArray[Any]:
        if self._data is None:
            raise ArrayReleasedError("the buffer of this array has been released")
        return self._data

    def __len__(self) -> int:
        return len(self._require())

    def __getitem__(self, offset: int) -> Any:
        return self._require()[offset]

    def __setitem__(self, offset: int, value: Any) -> None:
        self._require()[offset] = value


register_buffer(Buffer, qualname="strided.core.buffer.Buffer")
