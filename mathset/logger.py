import logging
import os
import sys
import time
import typing
from logging.handlers import RotatingFileHandler

_LogFormat = '%(asctime)s - %(levelname)s - %(message)s'

def setupLogger(
        logLevel: int = logging.WARNING,
        logFile: typing.Optional[str] = None
        ) -> None:
    logger = logging.getLogger()

    if logFile:
        logDir = os.path.dirname(logFile)
        if logDir:
            os.makedirs(logDir, exist_ok=True)
        fileHandler = RotatingFileHandler(
            logFile,
            maxBytes=1024 * 1024,
            backupCount=10)
        fileFormatter = logging.Formatter(_LogFormat)
        fileFormatter.converter = time.gmtime
        fileHandler.setFormatter(fileFormatter)
        logger.addHandler(fileHandler)

    consoleHandler = logging.StreamHandler(sys.stdout)
    logger.addHandler(consoleHandler)
    logger.setLevel(logLevel)

def setLogLevel(logLevel: int) -> None:
    logger = logging.getLogger()
    logger.setLevel(logLevel)
