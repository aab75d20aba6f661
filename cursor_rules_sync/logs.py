import logging

from rich.console import Console
from rich.logging import RichHandler

from cursor_rules_sync.constants import APP_NAME


def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(APP_NAME.replace("-", "_"))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers.clear()
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
