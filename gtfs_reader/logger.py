"""Logging utilities for GTFS Reader."""

import logging
import sys
from pathlib import Path
from typing import Optional

GtfsLogger = logging.getLogger("GtfsLogger")


def setup_logging(
    info_log_filename: Optional[Path] = None,
    debug_log_filename: Optional[Path] = None,
    std_out_level: str = "info",
):
    """Sets up the GtfsLogger w.r.t. the log file locations and the console level.

    Called by the test logging fixture in conftest.py and can be called by the user to setup
    logging for their session. If called multiple times, the logger will be reset.

    Args:
        info_log_filename: the location of the log file that will get created to add the INFO log.
            The INFO Log is terse, one line per table read and any warnings or errors.
            Defaults to None, which does not log INFO to a file.
        debug_log_filename: the location of the log file that will get created to add the DEBUG
            log. The DEBUG log is very noisy, with a line for every skipped or failed row.
            Defaults to None, which does not log DEBUG to a file.
        std_out_level: the level of logging to the console. One of "info", "warning", "debug".
            Defaults to "info" but will be set to ERROR if nothing provided matches.
    """
    # add function variable so that we know if logging has been called
    setup_logging.called = True

    # Clear handles if any exist already
    GtfsLogger.handlers = []

    GtfsLogger.setLevel(logging.DEBUG)

    FORMAT = logging.Formatter(
        "%(asctime)-15s %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S,"
    )

    if info_log_filename:
        info_file_handler = logging.FileHandler(Path(info_log_filename))
        info_file_handler.setLevel(logging.INFO)
        info_file_handler.setFormatter(FORMAT)
        GtfsLogger.addHandler(info_file_handler)

    if debug_log_filename:
        debug_log_handler = logging.FileHandler(Path(debug_log_filename))
        debug_log_handler.setLevel(logging.DEBUG)
        debug_log_handler.setFormatter(FORMAT)
        GtfsLogger.addHandler(debug_log_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(FORMAT)
    GtfsLogger.addHandler(console_handler)
    if std_out_level == "debug":
        console_handler.setLevel(logging.DEBUG)
    elif std_out_level == "info":
        console_handler.setLevel(logging.INFO)
    elif std_out_level == "warning":
        console_handler.setLevel(logging.WARNING)
    else:
        console_handler.setLevel(logging.ERROR)
