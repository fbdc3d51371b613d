#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import sys
import logging
import platform

from .config import CONFIG, Settings
from .log import init_logging
from .cli import app, get_app_version

def uncaught_global_exception_handler(exc_type, exc_value, exc_traceback):
    logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main():
    CONFIG.read_from_file()
    init_logging(CONFIG[Settings.LOG_LEVEL], CONFIG[Settings.LOG_TO_FILE])
    logger = logging.getLogger("main")
    sys.excepthook = uncaught_global_exception_handler

    logger.debug("Starting tempconv version %s on %s %s, settings from %s", get_app_version(),
                 platform.system(), platform.release(), CONFIG.settings_file)
    app(prog_name="tempconv")


if __name__ == "__main__":
    main()
