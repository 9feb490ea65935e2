import logging
from rich.logging import RichHandler

def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure the root logger to render through Rich.
    """
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )

def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger (after logging is configured).
    """
    return logging.getLogger(name)
