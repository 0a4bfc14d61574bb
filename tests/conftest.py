from __future__ import annotations

import loggable


def reset_loggable_config() -> None:
    """Reset the default interceptor between tests."""
    loggable._reset_default_interceptor()


import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_config() -> None:
    reset_loggable_config()
