import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager


class Log:
    """Process-wide logging facade for the report service."""

    _logger: logging.Logger = logging.getLogger("cureon")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach a stdout handler once and apply the requested level."""
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error together with the active traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    @contextmanager
    def timed(cls, label: str) -> Iterator[None]:
        """Log how long the wrapped block took, even when it raises."""
        started = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            cls._logger.info(f"{label} took {elapsed_ms:.0f} ms")
