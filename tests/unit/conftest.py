import pytest

from imgkit_core.config import set_config


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    set_config(None)
