# topmark:header:start
#
#   project      : SkillKit
#   file         : exit_codes.py
#   file_relpath : src/skillkit/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Exit codes for the ``sk`` CLI.

Codes follow the BSD `sysexits` convention where practical so other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ``sk`` CLI.

    Attributes:
        SUCCESS: Everything succeeded.
        FAILURE: A batch finished with failed items, or ``status`` found broken
            or blocked links.
        USAGE_ERROR: Invalid invocation, including an unknown platform key
            (EX_USAGE, 64).
        NOT_FOUND: The named module does not exist (EX_NOINPUT, 66).
        IO_ERROR: A single link operation failed (EX_IOERR, 74).
        CONFIG_ERROR: Platform configuration is missing or invalid (EX_CONFIG, 78).
        UNEXPECTED_ERROR: Unhandled exception.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    NOT_FOUND = 66
    IO_ERROR = 74
    CONFIG_ERROR = 78
    UNEXPECTED_ERROR = 255
