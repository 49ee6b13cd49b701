"""Exit codes shared by all CLI commands.

0 is success; 10-19 are validation errors (input, config).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for productive CLI commands."""

    SUCCESS = 0

    # Validation errors (10-19)
    INVALID_INPUT = 10
    CONFIG_ERROR = 11
