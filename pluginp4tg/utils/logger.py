import os
import sys
from loguru import logger


FILE_PATH_FORMAT = "{time:HH:mm:ss.SSS} | <level>{level: <8}</level> | <cyan>{file.path}:{line:}</cyan> <green>{function}</green> | {message}"
LOG_LEVEL = os.environ.get("P4TG_LOG_LEVEL", "INFO").upper()

__all__ = ("logger",)


logger.remove()
logger.add(sys.stderr, colorize=True, level=LOG_LEVEL, format=FILE_PATH_FORMAT)
