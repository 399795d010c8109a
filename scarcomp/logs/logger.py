# scarcomp/logs/logger.py

"""
Logger setup for scarcomp runs.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers. Drivers (the CLI, notebooks, batch scripts) call
:func:`get_logger` once to send the ``scarcomp`` log records of a run to
the console and to a per-run log file.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(
    run_name: str = "scarcomp",
    region: str = "all",
    log_dir: Optional[str] = None,
    level: str = "INFO",
) -> logging.Logger:
    """
    Configure and return the ``scarcomp`` package logger for a run.

    Parameters
    ----------
    run_name : str
        Name of the run, used in the log file name.
    region : str
        Region analysed by the run, used in the log file name.
    log_dir : str, optional
        Directory for ``<run_name>_<region>.log``. No file is written when
        omitted.
    level : str
        Logging level name (default ``'INFO'``).

    Returns
    -------
    logging.Logger
        The ``scarcomp`` logger. Handlers from a previous call are replaced.
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger("scarcomp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(numeric_level)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        path = os.path.join(log_dir, f"{run_name}_{region}.log")
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to {path}")

    return logger
