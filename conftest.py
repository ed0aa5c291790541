import pytest

from rangeset.config import configure, reset_settings


@pytest.fixture(autouse=True)
def check_invariants():
    """Verifies range set invariants after every mutation made by a test."""
    reset_settings()
    configure(check_invariants=True)
    yield
    reset_settings()
