from logging.config import dictConfig

from conslist.utils.env import getenv_bool

__all__ = ("setup_logging",)


def setup_logging(
    *loggers: str,
    time: bool = True,
    debug: bool | None = None,
    stream: str = "ext://sys.stdout",
    disable_existing_loggers: bool = True,
) -> None:
    """\
    Setup logging configuration and prepare specified loggers.

    Parameters
    ----------
    *loggers: str
        names of additional loggers to configure.
    time: bool = True
        include timestamps in logs (emits local timezone offset).
    debug: bool | None = None
        include debug logs, when not provided DEBUG_LOGGING env flag is used
        falling back to __debug__.
    stream: str = "ext://sys.stdout"
        stream used by the console handler.
    disable_existing_loggers: bool = True
        disable other loggers which were created before calling the setup.

    NOTE: this function should be run only once on application start
    """
    level: str = (
        "DEBUG"
        if (debug if debug is not None else getenv_bool("DEBUG_LOGGING", __debug__))
        else "INFO"
    )

    dictConfig(
        config={
            "version": 1,
            "disable_existing_loggers": disable_existing_loggers,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)-4s] [%(name)s] %(message)s",
                    "datefmt": "%d/%b/%Y:%H:%M:%S %z",
                }
                if time
                else {
                    "format": "[%(levelname)-4s] [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "level": level,
                    "formatter": "standard",
                    "class": "logging.StreamHandler",
                    "stream": stream,
                },
            },
            "loggers": {
                name: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                }
                for name in loggers
            },
            "root": {  # root logger
                "handlers": ["console"],
                "level": level,
            },
        },
    )
