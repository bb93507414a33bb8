"""Core domain types."""

from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok
from .settings import Prompter, ResolvedSettings, SetupOptions, resolve_settings

__all__ = [
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # settings
    "Prompter",
    "ResolvedSettings",
    "SetupOptions",
    "resolve_settings",
]
