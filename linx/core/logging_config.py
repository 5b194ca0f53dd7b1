import logging.config

from linx.core.config import settings


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure the root logger with a console handler.

    The level defaults to `LOG_LEVEL`. Loggers created by uvicorn are
    left enabled so access logs keep flowing.
    """
    level = (log_level or settings.log_level).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                },
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        }
    )
