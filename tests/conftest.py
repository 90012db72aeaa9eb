"""Shared pytest fixtures for the full contactinfo test suite."""

from __future__ import annotations

from collections.abc import Callable
from itertools import count

import pytest


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Provide a deterministic office id factory yielding `office-1`, `office-2`, ..."""

    counter = count(1)

    def _next_id() -> str:
        """Return the next deterministic office id."""

        return f"office-{next(counter)}"

    return _next_id
