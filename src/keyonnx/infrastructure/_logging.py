import logging
import sys
from typing import Optional, Union


def setup_logging(level: Optional[Union[int, str]] = None):
    """
    Configure the application's root logger.

    Uses the format "timestamp - logger name - level - message" and attaches a
    StreamHandler that writes logs to stdout. The library itself never calls
    this; applications opt in.

    Parameters
    ----------
    level : int or str or None, optional
        Logging level. Defaults to the `log_level` of the active `EngineConfig`.
    """
    if level is None:
        from ._configuration import get_config

        level = get_config().logging_level
    elif isinstance(level, str):
        level = getattr(logging, level.upper())

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )
