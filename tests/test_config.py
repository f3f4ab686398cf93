import os
from typing import Any
from unittest import mock

import pytest

from strided import Array2D
from strided.core.buffer import Buffer
from strided.core.config import Addressing, BadConfigError, config, get_addressing
from strided.registry import fully_qualified_name, get_buffer_class, register_buffer
from strided.testing.buffer import CountingBuffer


def test_config_defaults_set() -> None:
    # regression test for available defaults
    assert config.defaults == [
        {
            "array": {
                "order": "C",
                "bounds_check": False,
            },
            "buffer": "strided.core.buffer.Buffer",
        }
    ]
    assert config.get("array.order") == "C"
    assert config.get("array.bounds_check") is False
    assert get_addressing() == Addressing(order="C", bounds_check=False)


@pytest.mark.parametrize(
    ("key", "old_val", "new_val"),
    [("array.order", "C", "F"), ("array.bounds_check", False, True)],
)
def test_config_defaults_can_be_overridden(key: str, old_val: Any, new_val: Any) -> None:
    assert config.get(key) == old_val
    with config.set({key: new_val}):
        assert config.get(key) == new_val
    assert config.get(key) == old_val


def test_config_from_environment() -> None:
    with mock.patch.dict(
        os.environ, {"STRIDED_ARRAY__ORDER": "F", "STRIDED_ARRAY__BOUNDS_CHECK": "True"}
    ):
        config.refresh()
        assert get_addressing() == Addressing(order="F", bounds_check=True)


@pytest.mark.parametrize(
    ("key", "value"),
    [("array.order", "K"), ("array.order", None), ("array.bounds_check", "yes")],
)
def test_bad_addressing_config(key: str, value: Any) -> None:
    with config.set({key: value}):
        with pytest.raises(BadConfigError):
            get_addressing()
        with pytest.raises(BadConfigError):
            Array2D(2, 3)


def test_addressing_is_frozen_at_construction() -> None:
    with config.set({"array.order": "F", "array.bounds_check": True}):
        a = Array2D(2, 3)
    b = Array2D(2, 3)
    assert (a.order, a.bounds_check, a.strides) == ("F", True, (1, 2))
    assert (b.order, b.bounds_check, b.strides) == ("C", False, (3, 1))


def test_fully_qualified_name() -> None:
    class MockClass:
        pass

    assert (
        fully_qualified_name(MockClass)
        == f"{__name__}.test_fully_qualified_name.<locals>.MockClass"
    )


def test_config_buffer_implementation() -> None:
    # has default value
    assert fully_qualified_name(get_buffer_class()) == config.defaults[0]["buffer"]
    assert get_buffer_class() is Buffer

    class MockBuffer(Buffer):
        pass

    register_buffer(MockBuffer)
    with config.set({"buffer": fully_qualified_name(MockBuffer)}):
        assert get_buffer_class() is MockBuffer
        a = Array2D(2, 3)
        assert isinstance(a._buffer, MockBuffer)

    config.set({"buffer": "wrong_name"})
    with pytest.raises(BadConfigError):
        get_buffer_class()

    with mock.patch.dict(os.environ, {"STRIDED_BUFFER": fully_qualified_name(CountingBuffer)}):
        assert get_buffer_class(reload_config=True) is CountingBuffer
