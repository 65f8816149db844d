import enum
import logging
import mathset
import os
import typing

class ConfigOption(enum.Enum):
    LogLevel = 'MATHSET_LOG_LEVEL'
    LogFile = 'MATHSET_LOG_FILE'

class Config(object):
    DefaultLogLevel = logging.WARNING

    def __init__(
            self,
            logLevel: int = DefaultLogLevel,
            logFile: typing.Optional[str] = None
            ) -> None:
        self._logLevel = mathset.validateMandatoryInt(
            name='logLevel',
            value=logLevel,
            min=0)
        self._logFile = logFile

    def logLevel(self) -> int:
        return self._logLevel

    def logFile(self) -> typing.Optional[str]:
        return self._logFile

    @staticmethod
    def fromEnvironment(
            env: typing.Optional[typing.Mapping[str, str]] = None
            ) -> 'Config':
        if env is None:
            env = os.environ

        logLevel = Config._parseLogLevel(env.get(ConfigOption.LogLevel.value))
        logFile = env.get(ConfigOption.LogFile.value) or None
        return Config(logLevel=logLevel, logFile=logFile)

    @staticmethod
    def _parseLogLevel(value: typing.Optional[str]) -> int:
        if value is None:
            return Config.DefaultLogLevel
        value = value.strip()
        if not value:
            return Config.DefaultLogLevel

        if value.isdecimal():
            return int(value)

        level = logging.getLevelName(value.upper())
        if isinstance(level, int):
            return level

        logging.warning(
            f'Ignoring unknown log level "{value}" in {ConfigOption.LogLevel.value}, using {logging.getLevelName(Config.DefaultLogLevel)}')
        return Config.DefaultLogLevel
