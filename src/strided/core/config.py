"""
The config module is responsible for managing the configuration of strided and is based on the
Donfig python library. It selects the addressing convention and the access mode that newly
constructed arrays are built with, and the buffer implementation that backs them.

Example:
    Arrays constructed while a configuration is active keep that configuration for their
    whole lifetime.

    ```python
    from strided import Array2D
    from strided.core.config import config

    with config.set({"array.order": "F", "array.bounds_check": True}):
        a = Array2D(2, 3)
    ```

    Instead of setting the value programmatically with ``config.set``, you can also set the
    value with an environment variable. The environment variable ``STRIDED_ARRAY__ORDER`` can be
    set to ``F``. The double underscore ``__`` is used to indicate nested access.

    ```bash
    export STRIDED_ARRAY__ORDER="F"
    export STRIDED_ARRAY__BOUNDS_CHECK="True"
    ```

For more information, see the Donfig documentation at https://github.com/pytroll/donfig.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, NamedTuple, cast

from donfig import Config as DConfig

if TYPE_CHECKING:
    from strided.core.common import MemoryOrder


class BadConfigError(ValueError):
    _msg = "bad Config: %r"


class Config(DConfig):  # type: ignore[misc]
    """The Config will collect configuration from config files and environment variables

    Example environment variables:
    Grabs environment variables of the form "STRIDED_FOO__BAR_BAZ=123" and
    turns these into config variables of the form ``{"foo": {"bar-baz": 123}}``
    It transforms the key and value in the following way:

    -  Lower-cases the key text
    -  Treats ``__`` (double-underscore) as nested access
    -  Calls ``ast.literal_eval`` on the value

    """

    def reset(self) -> None:
        self.clear()
        self.refresh()


# The default configuration for strided
config = Config(
    "strided",
    defaults=[
        {
            "array": {
                "order": "C",
                "bounds_check": False,
            },
            "buffer": "strided.core.buffer.Buffer",
        }
    ],
)


def parse_indexing_order(data: Any) -> Literal["C", "F"]:
    if data in ("C", "F"):
        return cast("Literal['C', 'F']", data)
    msg = f"Expected one of ('C', 'F'), got {data} instead."
    raise ValueError(msg)


def parse_bool(data: Any) -> bool:
    if isinstance(data, bool):
        return data
    raise ValueError(f"Expected bool, got {data} instead.")


class Addressing(NamedTuple):
    """The addressing convention and access mode an array is built with."""

    order: MemoryOrder
    bounds_check: bool


def get_addressing() -> Addressing:
    """
    Read the addressing convention and access mode from the current configuration.

    Raises
    ------
    BadConfigError
        If ``array.order`` or ``array.bounds_check`` hold an invalid value.
    """
    try:
        order = parse_indexing_order(config.get("array.order"))
        bounds_check = parse_bool(config.get("array.bounds_check"))
    except ValueError as e:
        raise BadConfigError(str(e)) from e
    return Addressing(order=order, bounds_check=bounds_check)
