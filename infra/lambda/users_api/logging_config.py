"""
Logging setup for the Lambda function.

The Lambda runtime already attaches a handler to the root logger, in
which case only the level is applied.  Locally and in tests a console
handler is added.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
