# reindexer/logger.py
import logging
import sys

LOGGER_NAME = "reindexer"


def setup_logger(name=LOGGER_NAME, level=logging.INFO):
    """
    Sets up a logger with the specified name and level.
    Progress goes to stdout; warnings and errors go to stderr.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs
    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

        out = logging.StreamHandler(sys.stdout)
        out.addFilter(lambda record: record.levelno < logging.WARNING)
        out.setFormatter(formatter)
        logger.addHandler(out)

        err = logging.StreamHandler(sys.stderr)
        err.setLevel(logging.WARNING)
        err.setFormatter(formatter)
        logger.addHandler(err)

    return logger


def get_logger(module_name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{module_name.rsplit('.', 1)[-1]}")
