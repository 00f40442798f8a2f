import logging
import os
from .config import settings

def console_level(level_name):
    """Numeric level for a level name such as "debug"; INFO when the name is unknown."""
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else logging.INFO

def setup_logger(name='communitychat'):
    """Set up a logger with console and file output.

    Creates a logger that writes:
    - ``settings.log_level`` and above to console
    - DEBUG and above to file (logs/server.log)

    Calling it again with the same name returns the already configured
    logger without stacking extra handlers.

    Args:
        name (str, optional): Logger name. Defaults to 'communitychat'

    Returns:
        logging.Logger: Configured logger instance

    Side Effects:
        - Creates logs directory if it doesn't exist
        - Creates/appends to server.log file
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(console_level(settings.log_level))

    log_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'logs')
    os.makedirs(log_dir, exist_ok=True)
    file_handler = logging.FileHandler(os.path.join(log_dir, 'server.log'), encoding='utf-8')
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
