"""Logging setup shared by all uml_codegen modules.

Modules obtain their logger with ``get_logger(__name__)``. Nothing is
printed until an application (the CLI, or a caller of the library)
calls ``setup_logging``.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "uml_codegen"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str | int = "warning", rich_output: bool = True) -> None:
    """Configure the package root logger.

    Args:
        level: Level name ("debug", "info", ...) or a logging constant.
        rich_output: Use a ``RichHandler``; otherwise a plain stream handler.
    """
    if isinstance(level, str):
        level = _LEVELS.get(level.lower(), logging.WARNING)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    if rich_output:
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root.addHandler(handler)
    root.propagate = False


# Library default: stay silent unless the application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
