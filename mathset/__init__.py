__version__ = '1.0.0'

from mathset.validation import validateMandatoryInt, validateOptionalInt, \
    validateMandatorySet, validateCapacityHint
from mathset.set import Set
from mathset.functions import union, intersection
from mathset.logger import setupLogger, setLogLevel
from mathset.config import ConfigOption, Config
