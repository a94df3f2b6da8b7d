import logging
import sys


class Log:
    """Centralized logging with structured format.

    Keyword arguments are appended to the message as ``key=value`` pairs so
    that Cloud Logging shows them without a custom formatter.
    """

    _logger: logging.Logger = logging.getLogger("mediaguard")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(cls._render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(cls._render(message, fields))

    @classmethod
    def exception(cls, message: str, **fields: object) -> None:
        """Log an error together with the traceback of the exception being handled."""
        cls._logger.exception(cls._render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(cls._render(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(cls._render(message, fields))

    @staticmethod
    def _render(message: str, fields: dict[str, object]) -> str:
        if not fields:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} {pairs}"
