"""Tests for the logging_setup module."""

import importlib

from loguru import logger

from filesplitter import logging_setup


class TestImportBehaviour:
    """Importing the package must not disturb the host's loguru setup."""

    def test_import_keeps_host_sinks(self) -> None:
        """Test that reloading the module leaves existing sinks in place and silences package records."""
        received = []
        sink_id = logger.add(received.append, format="{message}")
        try:
            importlib.reload(logging_setup)
            logger.info("host message")
            logging_setup.log_info("package message")
        finally:
            logger.remove(sink_id)

        assert any("host message" in m for m in received)
        assert not any("package message" in m for m in received)


class TestEnvTruthy:
    """Test cases for env_truthy function."""

    def test_truthy_values(self, monkeypatch) -> None:
        for raw in ("1", "true", " YES ", "on"):
            monkeypatch.setenv("FILESPLITTER_TEST_FLAG", raw)
            assert logging_setup.env_truthy("FILESPLITTER_TEST_FLAG")

    def test_unset_uses_default(self, monkeypatch) -> None:
        monkeypatch.delenv("FILESPLITTER_TEST_FLAG", raising=False)
        assert logging_setup.env_truthy("FILESPLITTER_TEST_FLAG", default=True)
        assert not logging_setup.env_truthy("FILESPLITTER_TEST_FLAG")
