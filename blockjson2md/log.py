"""
Logging setup for command-line runs of blockjson2md.

Library modules only call ``logging.getLogger(__name__)``; the handler and
level are attached to the root logger by ``config_logger`` when the CLI starts.
"""

from logging import (
    CRITICAL,
    DEBUG,
    INFO,
    WARNING,
    FileHandler,
    Formatter,
    Handler,
    StreamHandler,
    getLogger,
)
from pathlib import Path
from typing import Final

LOGFILE_NAME: Final[str] = "blockjson2md.log"

# -v count -> root logger level; 0 silences everything
VERBOSITY_LEVELS: Final[dict[int, int]] = {
    0: CRITICAL + 1,
    1: WARNING,
    2: INFO,
    3: DEBUG,
}

CONSOLE_FORMAT: Final[str] = "%(levelname)-8s [%(name)s] %(message)s"
FILE_FORMAT: Final[str] = (
    "%(asctime)s %(levelname)-8s [%(name)s %(funcName)s:%(lineno)d] %(message)s"
)


def config_logger(
    file_logging: bool = False,
    verbosity_level: int = 0,
    logfile: Path | str = LOGFILE_NAME,
) -> Handler:
    """
    Attach a console or file handler to the root logger.

    Parameters
    ----------
    file_logging : bool, default = False
        If True, messages are appended to ``logfile``. If False, they go to
        stderr.
    verbosity_level : int, default = 0
        Number of -v flags, between 0 and 3: disabled, WARNING, INFO, DEBUG.
    logfile : Path or str, default = LOGFILE_NAME
        Log file used when ``file_logging`` is set. Relative paths are taken
        from the current directory.

    Returns
    -------
    logging.Handler
        The handler that was added, so callers can detach it again.

    Raises
    ------
    ValueError
        If ``verbosity_level`` is out of range.
    """
    if verbosity_level not in VERBOSITY_LEVELS:
        raise ValueError("verbosity_level must be between 0 and 3")

    handler: Handler
    if file_logging:
        handler = FileHandler(logfile, mode="a", encoding="utf-8")
        handler.setFormatter(Formatter(fmt=FILE_FORMAT, datefmt="%H:%M:%S"))
    else:
        handler = StreamHandler()
        handler.setFormatter(Formatter(fmt=CONSOLE_FORMAT))

    # Level stays on the logger only; a handler level breaks pytest log capture.
    root = getLogger()
    root.setLevel(VERBOSITY_LEVELS[verbosity_level])
    root.addHandler(handler)
    return handler
