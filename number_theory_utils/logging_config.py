import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import NumberTheoryConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(service_name, config: Optional[NumberTheoryConfig] = None):
    """
    Configure logging for the given service.

    Layout when file logging is enabled:
    <log_dir>/
        {service_name}.log   - rotating log of the current service

    Calling this again for the same service replaces its handlers instead of
    stacking new ones.

    :param service_name: Logger name (string)
    :param config: Settings providing level, directory and the file switch
    :return: Logger for the service
    """
    config = config or NumberTheoryConfig()
    level = logging.getLevelName(config.log_level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Drop handlers left over from a previous call
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if config.log_to_file:
        logs_dir = Path(config.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)

        file_handler = RotatingFileHandler(
            str(logs_dir / f'{service_name}.log'),
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger
