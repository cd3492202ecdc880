import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV = "SHOPHUB_LOG_LEVEL"


class PaddedNameFormatter(logging.Formatter):
    """
    Pads logger names to the widest one seen so far, so messages line up.
    """

    name_width = 14

    def format(self, record):
        PaddedNameFormatter.name_width = max(
            PaddedNameFormatter.name_width, len(record.name)
        )
        message = super().format(record)
        return message.replace(
            f"[{record.name}]",
            f"[{record.name.center(PaddedNameFormatter.name_width)}]",
            1,
        )


def _resolve_level() -> int:
    if os.getenv("DEBUG"):
        return logging.DEBUG
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Returns a logger writing through RichHandler.
    Level comes from DEBUG (forces debug) or SHOPHUB_LOG_LEVEL.
    """
    logger = logging.getLogger(name or "shophub")
    log_level = _resolve_level()
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(PaddedNameFormatter("[%(name)s]  %(message)s"))
        handler.setLevel(log_level)
        logger.addHandler(handler)

        logger.propagate = False
        logger.debug(f"Logger '{logger.name}' ready.")

    return logger
