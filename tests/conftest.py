import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    # loguru does not propagate to caplog, so collect messages with a list sink
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
