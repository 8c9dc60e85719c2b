# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/bashful/cli/exit_codes.py
#   project      : Bashful
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Bashful CLI.

Bashful aligns with the BSD `sysexits` convention where practical so other
tooling can interpret failures consistently. Commands that end a script on the
caller's behalf (`die`, `usage`, `exec`) exit with the code chosen by the
caller or by the executed command instead.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Bashful CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; also the default code of `die`.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A source is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A source or script does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a source. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Unreadable or malformed config file. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
