import pytest
from loguru import logger

from filesplitter.constants import DEBUG_ENV, LOG_ENV
from filesplitter.logging_setup import init_logger


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    """Send the diagnostic log into the test's temp dir."""
    path = tmp_path / "filesplitter.log"
    monkeypatch.setenv(LOG_ENV, str(path))
    monkeypatch.setenv(DEBUG_ENV, "1")
    init_logger()
    yield path
    logger.remove()
