#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import logging
import os

from logging.handlers import TimedRotatingFileHandler
from .config import CONFIG, Settings, LOG_DIR
from .model.times import now_local

LOG_FILE = "app-%TIME%.log"

def init_logging(level: int = logging.WARNING, to_file: bool = False, log_dir: str = LOG_DIR) -> None:
    """
    Initialize application-wide logging.

    - Logs to the console (stderr) and, when enabled, to a rotating file under log_dir.
    - File name includes current year and month for convenience.
    - Safe to call multiple times; subsequent calls are ignored.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # Already initialized

    fmt = "%(asctime)s %(levelname)s [%(threadName)s] [%(name)s] %(message)s"
    datefmt = "%b-%d %H:%M:%S"
    msfmt = "%s.%03d"

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(fmt=fmt))
    ch.formatter.default_time_format = datefmt
    ch.formatter.default_msec_format = msfmt
    root.addHandler(ch)

    if to_file:
        os.makedirs(log_dir, exist_ok=True)
        now = now_local(CONFIG[Settings.LOCAL_TIMEZONE])
        logfile = os.path.join(log_dir, LOG_FILE.replace("%TIME%", now.strftime("%Y-%m")))

        # File handler with rotation
        fh = TimedRotatingFileHandler(logfile, when='D', interval=30, backupCount=12, encoding='utf-8')  # Keep 12 months
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(fmt=fmt))
        fh.formatter.default_time_format = datefmt
        fh.formatter.default_msec_format = msfmt
        root.addHandler(fh)

    root.setLevel(level)
