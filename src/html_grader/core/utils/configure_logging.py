import logging
import sys


def configure_logger(general_level='WARNING', silenced_loggers=None):
    """
    Configures the root logger with a single stderr handler, so that stdout
    only ever carries the report.
    """
    # 1. Create the stderr handler and a standard formatter.
    stderr_handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    )
    stderr_handler.setFormatter(formatter)

    # 2. Configure the root logger.
    root_logger = logging.getLogger()
    log_level = getattr(logging, general_level.upper(), logging.WARNING) if isinstance(general_level, str) else general_level
    root_logger.setLevel(log_level)

    # 3. Clear any existing handlers and add the new one.
    root_logger.handlers.clear()
    root_logger.addHandler(stderr_handler)

    # 4. Muzzle noisy loggers by setting their level high.
    if silenced_loggers:
        for name, level in silenced_loggers.items():
            level_to_set = getattr(logging, level.upper(), logging.CRITICAL) if isinstance(level, str) else level
            logging.getLogger(name).setLevel(level_to_set)
