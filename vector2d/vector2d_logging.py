"""Logging support for vector2d.

The package logs through the standard :mod:`logging` module under a single
root logger named ``VECTOR2D``. Each module creates a child logger with
:func:`create_module_logger`, and the :func:`method_logger` decorator emits
DEBUG records whenever the wrapped method is invoked.

Nothing is written anywhere by default. Use :func:`log_to_stderr` to see the
records::

    from vector2d.vector2d_logging import DEBUG, log_to_stderr

    log_to_stderr(DEBUG)

"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO

__all__ = [
    "DEBUG",
    "INFO",
    "create_module_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

VECTOR2D_LOGGER_NAME = "VECTOR2D"
DEFAULT_LEVEL = DEBUG
LOGGER_FORMAT = "[%(name)s %(levelname)s] %(message)s"

_module_loggers: dict[str, logging.Logger] = {}

logging.getLogger(VECTOR2D_LOGGER_NAME).addHandler(logging.NullHandler())


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Create a module logger.

    Args:
        name: name of the module for which the logger is being created. When
            omitted, the name of the calling module is used.

    Returns:
        the logger, named ``VECTOR2D.<module name>``

    """
    if name is None:
        frame = inspect.stack()[1]
        module = inspect.getmodule(frame[0])
        name = module.__name__ if module is not None else "__main__"

    logger = logging.getLogger(f"{VECTOR2D_LOGGER_NAME}.{name}")
    _module_loggers[name] = logger
    return logger


def get_module_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``, creating it when needed."""
    try:
        return _module_loggers[name]
    except KeyError:
        return create_module_logger(name)


def get_rootlogger() -> logging.Logger:
    """Return the root logger of the package."""
    return logging.getLogger(VECTOR2D_LOGGER_NAME)


def method_logger(name: str):
    """Decorator for adding debug logging to a method.

    Args:
        name: the name of the module in which the decorated method lives

    Must be applied inside a class body, the class name is read from the
    enclosing frame.
    """
    logger = get_module_logger(name)
    classname = inspect.getouterframes(inspect.currentframe())[1][3]

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # args[0] is self or cls
            logger.debug(
                f"calling {classname}.{func.__name__} with {args[1:]} and {kwargs}"
            )
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def log_to_stderr(
    level: int | None = None, pass_root_logger_level: bool = False
) -> logging.Logger:
    """Attach a stream handler writing to stderr to the package root logger.

    Args:
        level: logging level to set on the package root logger
        pass_root_logger_level: whether records propagate to the Python root logger

    Returns:
        the package root logger

    """
    logger = get_rootlogger()
    if not any(
        type(handler) is logging.StreamHandler for handler in logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOGGER_FORMAT))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)

    logger.propagate = pass_root_logger_level
    return logger
