import logging.config


def configure_logging(level: str = "INFO") -> None:
    loglevel = (level or "INFO").upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "[%(asctime)s] %(levelname)s %(name)s %(message)s",
                "datefmt": "%d/%m/%Y %H:%M:%S %Z",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": loglevel,
                "formatter": "default",
            },
        },
        "loggers": {
            "postboard": {
                "level": loglevel,
                "handlers": ["console"],
                "propagate": False,
            },
            # Engine echo would print bound parameters, password hashes included.
            "sqlalchemy.engine": {
                "level": "WARNING",
            },
        },
    })
