from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, Verbosity, settings

from strided.core.config import config
from strided.testing.buffer import CountingBuffer

if TYPE_CHECKING:
    from collections.abc import Generator

    from strided.core.common import MemoryOrder


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    config.reset()
    yield
    config.reset()


@pytest.fixture
def counting_buffer() -> Generator[type[CountingBuffer], None, None]:
    CountingBuffer.reset()
    with config.set({"buffer": "strided.testing.buffer.CountingBuffer"}):
        yield CountingBuffer
    CountingBuffer.reset()


@pytest.fixture(params=["C", "F"])
def order(request: pytest.FixtureRequest) -> Generator[MemoryOrder, None, None]:
    with config.set({"array.order": request.param}):
        yield request.param


@pytest.fixture
def checked() -> Generator[None, None, None]:
    with config.set({"array.bounds_check": True}):
        yield


settings.register_profile(
    "default",
    parent=settings.get_profile("default"),
    max_examples=100,
    suppress_health_check=[HealthCheck.filter_too_much, HealthCheck.too_slow],
    deadline=None,
    verbosity=Verbosity.normal,
)
settings.register_profile(
    "ci",
    parent=settings.get_profile("ci"),
    max_examples=300,
    derandomize=True,  # more like regression testing
    deadline=None,
    suppress_health_check=[HealthCheck.filter_too_much, HealthCheck.too_slow],
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
