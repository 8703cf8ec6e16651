"""Logging helpers for globegrid.

Modeled on the default `logging approach that comes with Python <https://docs.python.org/library/logging.html>`_.
All globegrid loggers live under the ``GLOBEGRID`` root logger, which carries a
``NullHandler`` so that nothing is printed unless the application configures
logging or calls :func:`log_to_stderr`.
"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO

__all__ = [
    "DEBUG",
    "DEFAULT_LEVEL",
    "INFO",
    "LOGGER_NAME",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

LOGGER_NAME = "GLOBEGRID"
DEFAULT_LEVEL = DEBUG


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Helper function for creating a module logger.

    Args:
        name: The name to be given to the logger. If the name is None, the name defaults
            to the name of the calling module.

    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        name = mod.__name__
    logger = logging.getLogger(f"{LOGGER_NAME}.{name}")

    _module_loggers[name] = logger
    return logger


def get_module_logger(name: str) -> logging.Logger:
    """Helper function for getting the module logger.

    Args:
        name: The name of the module in which the method being decorated is located

    """
    try:
        logger = _module_loggers[name]
    except KeyError:
        logger = create_module_logger(name)

    return logger


_rootlogger = logging.getLogger(LOGGER_NAME)
_rootlogger.addHandler(logging.NullHandler())
_module_loggers: dict[str, logging.Logger] = {}
_logger = get_module_logger(__name__)


def method_logger(name: str):
    """Decorator for adding logging to a method.

    Args:
        name: The name of the module in which the method being decorated is located

    """
    logger = get_module_logger(name)
    classname = inspect.getouterframes(inspect.currentframe())[1][3]

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # args[0] is the instance
            if logger.isEnabledFor(DEBUG):
                logger.debug(
                    f"calling {classname}.{func.__name__} with {args[1::]} and {kwargs}"
                )
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def function_logger(name: str):
    """Decorator for adding logging to a function.

    Args:
        name: The name of the module in which the function being decorated is located

    """
    logger = get_module_logger(name)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if logger.isEnabledFor(DEBUG):
                logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def get_rootlogger() -> logging.Logger:
    """Return the globegrid root logger."""
    return _rootlogger


def log_to_stderr(level: int | None = None, pass_through: bool = True) -> logging.Logger:
    """Log globegrid messages to stderr.

    Args:
        level: The minimum level of the messages that will be logged, defaults to DEBUG
        pass_through: also pass the messages on to the handlers of the python root logger

    Returns:
        the globegrid root logger

    """
    if not level:
        level = DEFAULT_LEVEL

    logger = get_rootlogger()
    logger.setLevel(level)
    logger.propagate = pass_through

    # avoid creation of multiple stream handlers for logging to console
    for entry in logger.handlers:
        if isinstance(entry, logging.StreamHandler):
            return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
    )
    logger.addHandler(handler)

    _logger.info("globegrid logging to stderr enabled")
    return logger
