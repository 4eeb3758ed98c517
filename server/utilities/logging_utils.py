import logging

from utilities.config import LOG_LEVEL


def setup_logger(name: str) -> logging.Logger:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    )
    logger = logging.getLogger(name)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return logger
