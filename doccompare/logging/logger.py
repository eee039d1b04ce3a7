"""Process-wide logging facade.

Keyword arguments are context fields and are appended to the message as
``key=value`` pairs in call order, e.g.
``Log.info("Stored upload", stored_name="a_1.pdf")`` logs
``Stored upload stored_name=a_1.pdf``.
"""

import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    _logger: logging.Logger = logging.getLogger("doccompare")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach one stream handler (stdout unless given).

        Later calls only change the level.
        """
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._emit(logging.DEBUG, message, fields)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._emit(logging.INFO, message, fields)

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._emit(logging.WARNING, message, fields)

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._emit(logging.ERROR, message, fields)

    @classmethod
    def _emit(cls, level: int, message: str, fields: dict[str, object]) -> None:
        if not cls._logger.isEnabledFor(level):
            return
        if fields:
            context = " ".join(f"{key}={value}" for key, value in fields.items())
            message = f"{message} {context}"
        cls._logger.log(level, message)
