#!filepath: chrono_helper/__init__.py

__version__ = "0.2.0"

from .utils.logger import Logging, logs, init_logging
from .utils.errors import UserInputError
from .utils.params import ParameterSet
from .utils.datetime_utils import DateTimeUtils
from .config.app_config import AppConfig
from .core import Instant, Duration, DurationUnit
from .helper import DateTimeHelper, SubExpression, render, expr

datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "datetime_utils", "DateTimeUtils",
    "ParameterSet", "UserInputError",
    "Instant", "Duration", "DurationUnit",
    "DateTimeHelper", "SubExpression", "render", "expr",
]
