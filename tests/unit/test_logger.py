import logging
from collections.abc import Iterator

import pytest

from pedagogy.logging.logger import Log


@pytest.fixture()
def clean_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("pedagogy")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    logger.handlers.clear()
    yield logger
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    logger.handlers[:] = saved[2]


class TestLog:
    def test_configure_sets_level_and_single_handler(self, clean_logger: logging.Logger) -> None:
        Log.configure("debug")
        Log.configure("debug")

        assert clean_logger.level == logging.DEBUG
        assert len(clean_logger.handlers) == 1

    def test_configure_quiets_pdf_parsers(self, clean_logger: logging.Logger) -> None:
        Log.configure("DEBUG")
        assert logging.getLogger("pdfminer").level == logging.WARNING

    def test_messages_reach_the_pedagogy_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="pedagogy"):
            Log.info("Document analysé")
        assert "Document analysé" in caplog.text
