import pytest
from loguru import logger

from bmsearch import BoyerMooreSearcher


@pytest.fixture
def searcher():
    """Fixture that provides a searcher over the default 256 symbol alphabet."""
    return BoyerMooreSearcher(256)


@pytest.fixture
def sample_text():
    """Fixture that provides a sample text for testing."""
    return "HERE IS A SIMPLE EXAMPLE, AND HERE IS ANOTHER SIMPLE EXAMPLE"


@pytest.fixture
def captured_logs():
    """Collect loguru messages emitted during a test."""
    messages = []
    logger.enable("bmsearch")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_logger():
    """The CLI and the API install sinks on the captured streams, drop them afterwards."""
    yield
    logger.remove()
    logger.disable("bmsearch")
