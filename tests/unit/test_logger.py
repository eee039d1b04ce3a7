import io
import logging
from collections.abc import Generator

import pytest

from doccompare.logging.logger import Log


@pytest.fixture()
def isolated_logger() -> Generator[logging.Logger, None, None]:
    logger = Log._logger
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    try:
        yield logger
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)


class TestLogConfigure:
    def test_writes_formatted_messages(self, isolated_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("info", stream=stream)

        Log.info("stored report_1.pdf")
        Log.debug("hidden")

        output = stream.getvalue()
        assert "[INFO] stored report_1.pdf" in output
        assert "hidden" not in output

    def test_reconfigure_keeps_single_handler(self, isolated_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream=stream)
        Log.configure("DEBUG", stream=io.StringIO())

        Log.debug("now visible")

        assert len(isolated_logger.handlers) == 1
        assert "[DEBUG] now visible" in stream.getvalue()


class TestLogFields:
    def test_appends_fields_in_call_order(self, isolated_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream=stream)

        Log.info("Upload stored", stored_name="a_1.pdf", size_bytes=4)

        assert "[INFO] Upload stored stored_name=a_1.pdf size_bytes=4" in stream.getvalue()

    def test_field_names_may_shadow_record_attributes(
        self, isolated_logger: logging.Logger
    ) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream=stream)

        Log.warning("Rejected", name="x.exe", message="bad type")

        assert "Rejected name=x.exe message=bad type" in stream.getvalue()

    def test_disabled_level_is_not_formatted(self, isolated_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("ERROR", stream=stream)

        Log.info("quiet", stored_name="a_1.pdf")

        assert stream.getvalue() == ""
