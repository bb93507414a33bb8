"""Process and filesystem access."""

from .files import write_text
from .process import ProcessError, run, run_silent, which

__all__ = [
    # files
    "write_text",
    # process
    "ProcessError",
    "run",
    "run_silent",
    "which",
]
