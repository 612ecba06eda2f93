import pytest

from core import state


@pytest.fixture(autouse=True)
def default_language():
    state.reset()
    yield
    state.reset()
