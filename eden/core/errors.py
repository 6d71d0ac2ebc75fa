# SPDX-License-Identifier: MIT
"""Process exit codes.

Every command exits with one of these values; they are part of the CLI
contract and should remain stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success (config loaded and every check passed, or init succeeded)
    - 1: At least one check failed
    - 2: User error (unsupported init format, target file already exists)
    - 3: Config error (not found, unreadable, unparsable, invalid)
    - 4: I/O error (init could not write its file)
    """

    OK = 0
    CHECKS_FAILED = 1
    USER_ERROR = 2
    CONFIG_ERROR = 3
    IO_ERROR = 4
