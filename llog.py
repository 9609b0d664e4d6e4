# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os

CONFIG_ENV = "BFH_LOGGING_CONFIG"

logging_initialized = False

def config_file():
    # Only an explicitly named file, never logging.ini from the working
    # directory.
    return os.environ.get(CONFIG_ENV) or None

def init():
    global logging_initialized

    if logging_initialized:
        return

    path = config_file()
    if path:
        logging.config.fileConfig(path, disable_existing_loggers=False)
    else:
        # Library use; leave the application's logging alone.
        for name in ("bfh", "bfhcheck"):
            logging.getLogger(name).addHandler(logging.NullHandler())

    logging_initialized = True

if not logging_initialized:
    init()
