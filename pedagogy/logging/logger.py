import logging
import sys


class Log:
    """Process-wide logging facade for the transformation pipeline."""

    _logger: logging.Logger = logging.getLogger("pedagogy")

    # PDF parsing libraries log every token at DEBUG.
    _NOISY_LOGGERS: tuple[str, ...] = ("pdfminer", "pdfplumber", "fontTools")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach one stdout handler and quiet the PDF parsers."""
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        for name in cls._NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)
