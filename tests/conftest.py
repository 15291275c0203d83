import pytest

from turn_tracker.core.error_handling import ERROR_HANDLER


@pytest.fixture(autouse=True)
def clear_error_history():
    ERROR_HANDLER.clear()
    yield
    ERROR_HANDLER.clear()
