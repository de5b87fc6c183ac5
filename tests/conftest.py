"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from src.domain.task import Task


@pytest.fixture
def now() -> datetime:
    """Fixed local clock: Wednesday 13 March 2024, 10:30."""
    return datetime(2024, 3, 13, 10, 30)


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Factory building Task models with test defaults."""
    counter = 0

    def _make_task(**overrides: Any) -> Task:
        nonlocal counter
        counter += 1
        data: dict[str, Any] = {
            "id": f"task_{counter}",
            "name": f"Task {counter}",
            "created_at": datetime(2024, 3, 1, 9, 0),
        }
        data.update(overrides)
        return Task(**data)

    return _make_task
