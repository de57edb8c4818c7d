import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def quiet_slider_logs():
    """Put logging back in its library state after each test."""
    yield
    logger.remove()
    logger.disable("slider")
