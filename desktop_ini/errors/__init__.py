"""Module de gestion des errors."""

from desktop_ini.errors.base import ErrorHandler, ErrorHandlerChain
from desktop_ini.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           IniStyleError,
                                           InvalidNameError,
                                           InvalidValueError,
                                           NameRule,
                                           NotFoundError)
from desktop_ini.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "IniStyleError",
    "InvalidNameError",
    "InvalidValueError",
    "NameRule",
    "NotFoundError",
    "ErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
