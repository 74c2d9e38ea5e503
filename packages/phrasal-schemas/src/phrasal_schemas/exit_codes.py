"""CLI exit code taxonomy and error-to-exit-code registry.

Exit code ranges:
- 0: Success
- 10-19: Client/input errors
- 20-29: Processing errors (undecodable model output)
- 30-39: External service errors (transport, upstream status)
- 99: Unexpected runtime errors
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """CLI exit codes by failure category."""

    SUCCESS = 0
    INPUT_ERROR = 10
    DECODE_ERROR = 20
    CONNECTION_ERROR = 30
    UPSTREAM_ERROR = 31
    RUNTIME_ERROR = 99


ERROR_CODE_TO_EXIT_CODE: dict[str, ExitCode] = {
    "input_error": ExitCode.INPUT_ERROR,
    "decode_error": ExitCode.DECODE_ERROR,
    "transport_error": ExitCode.CONNECTION_ERROR,
    "upstream_status": ExitCode.UPSTREAM_ERROR,
    "runtime_error": ExitCode.RUNTIME_ERROR,
}


def resolve_exit_code(error_code: str) -> ExitCode:
    """Resolve an error code string to its ExitCode.

    Args:
        error_code: The error code string (e.g. "transport_error").

    Returns:
        The matching ExitCode, or RUNTIME_ERROR if no mapping is found.
    """
    return ERROR_CODE_TO_EXIT_CODE.get(error_code, ExitCode.RUNTIME_ERROR)
