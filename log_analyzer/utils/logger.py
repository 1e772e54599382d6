import logging
import os
from datetime import datetime

from log_analyzer.utils.constants import LOG_DIR, LOG_LEVEL, LOG_TO_FILE


def setup_logger(
    name: str, log_level: int | str = LOG_LEVEL, log_to_file: bool = LOG_TO_FILE, log_dir: str = LOG_DIR
) -> logging.Logger:
    """
    Return the per-module analyzer logger (named after the module file).
    Level, file logging and log directory default to config.json. Records carry the thread name
    so worker-pool output can be told apart. Handlers are attached only on the first call per name.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.propagate = False

    if not logger.handlers:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s")

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_to_file:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            log_file_path = os.path.join(log_dir, f"{name}_{timestamp}.log")
            file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
