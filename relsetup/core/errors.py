"""Exit codes for the relsetup CLI.

The setup flow is best effort: npm and git failures never change the exit
status. Only bad input surfaces as a non-zero code.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success (including runs where npm or git commands failed)
    - 1: User error (unparseable package.json, bad --cwd)
    """

    OK = 0
    USER_ERROR = 1
