import logging

from jobboard.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None):
    """Configure root logging once for the service.

    Uvicorn and pytest install their own handlers; in that case this is a no-op
    apart from setting the ``jobboard`` logger level.
    """
    level = (level or settings.log_level).upper()
    logging.getLogger("jobboard").setLevel(level)
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
