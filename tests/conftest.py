"""Pytest configuration.

Settings and the logger are process-wide caches; every test starts from a
clean environment so FP_* variables on the host cannot leak in.
"""

import pytest

from fp.core.config import get_settings
from fp.core.container import get_logger


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear FP_* variables and reset cached settings and logger."""
    for name in ("FP_ENVIRONMENT", "FP_LOG_LEVEL", "FP_LOG_CAUGHT_EXCEPTIONS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
