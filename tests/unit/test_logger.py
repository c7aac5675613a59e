import logging

import pytest

from mediacapture.logging.logger import Log


class TestLog:
    def test_configure_sets_level_and_single_handler(self) -> None:
        Log.configure("debug")
        Log.configure("debug")

        logger = logging.getLogger("mediacapture")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_messages_reach_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="mediacapture"):
            Log.info("Upload 7 processed successfully")
            Log.warning("Upload 8 not found")

        assert "Upload 7 processed successfully" in caplog.text
        assert "Upload 8 not found" in caplog.text

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="mediacapture"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                Log.exception("Processing failed")

        assert "Processing failed" in caplog.text
        assert "RuntimeError: boom" in caplog.text
