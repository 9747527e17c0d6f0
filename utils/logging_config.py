import logging
from typing import Optional

DEFAULT_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None,
                      logger_name: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to logger_name (root if None) and set its level."""
    if fmt is None:
        fmt = DEFAULT_FORMAT
    target = logging.getLogger(logger_name)
    if not target.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        target.addHandler(handler)
    target.setLevel(level)
    return target
