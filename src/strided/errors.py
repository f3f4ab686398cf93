__all__ = [
    "ArrayReleasedError",
    "BaseStridedError",
    "IndexOutOfRangeError",
    "InvalidExtentError",
    "ReadOnlyElementError",
]


class BaseStridedError(ValueError):
    """
    Base error which all strided errors are sub-classed from.
    """

    _msg: str = "{}"

    def __init__(self, *args: object) -> None:
        """
        If a single argument is passed, treat it as a pre-formatted message.

        If multiple arguments are passed, they are used as arguments for a template string class
        variable.
        """
        if len(args) == 1:
            super().__init__(args[0])
        else:
            super().__init__(self._msg.format(*args))


class InvalidExtentError(BaseStridedError):
    """
    Raised when an array is constructed with a non-positive extent.

    Axes are validated in order and only the first offending axis is reported.
    """

    _msg = "Extent of axis {} must be a positive integer. Got {} instead."

    def __init__(self, axis: int, extent: int) -> None:
        self.axis = axis
        self.extent = extent
        super().__init__(axis, extent)


class IndexOutOfRangeError(IndexError):
    """
    Raised by bounds-checked access when a coordinate lies outside ``[0, extent)``.
    """

    def __init__(self, axis: int, index: int, extent: int) -> None:
        self.axis = axis
        self.index = index
        self.extent = extent
        super().__init__(
            f"index {index} is out of bounds for axis {axis} with length {extent}"
        )


class ArrayReleasedError(RuntimeError):
    """
    Raised when elements of an array are accessed after its buffer was released.
    """


class ReadOnlyElementError(TypeError):
    """
    Raised when writing through a read-only element reference.
    """
