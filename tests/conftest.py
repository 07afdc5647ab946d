import pytest

from lambspec.config import reset_settings


pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def clean_settings():
    """Avoid cross-test leakage of cached settings."""
    reset_settings()
    yield
    reset_settings()
