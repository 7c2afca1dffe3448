"""Response interpretation: status text, exit codes and reply payloads."""

from __future__ import annotations

from enum import IntEnum


class ResponseCode(IntEnum):
    """Status byte the daemon puts first in every reply."""

    SUCCESS = 0x00
    INTERNAL_ERROR = 0x01
    INVALID_REQUEST = 0x02
    REJECTED = 0x03
    HARDWARE_ERROR = 0x04


class DaemonStatus(IntEnum):
    """Single reply argument of STATUS."""

    SUSPENDED = 0x00
    ACTIVE = 0x01


ERROR_TEXT: dict[int, str] = {
    ResponseCode.SUCCESS: "Success",
    ResponseCode.INTERNAL_ERROR: "Failed - Internal Error",
    ResponseCode.INVALID_REQUEST: "Failed - Invalid Command or Request",
    ResponseCode.REJECTED: "Failed - Request Rejected by Daemon",
    ResponseCode.HARDWARE_ERROR: "Failed - BMC Hardware Error",
}

UNKNOWN_ERROR_TEXT = "Failed - Unknown Error"


def parse_error(code: int) -> str:
    """Map a response code to the text shown to the user."""
    return ERROR_TEXT.get(code, UNKNOWN_ERROR_TEXT)


def exit_code(code: int) -> int:
    """Process return value for a response code: 0 or the negated code."""
    return -int(code)


def parse_daemon_status(args: bytes) -> DaemonStatus:
    """Parse the argument of a successful STATUS reply.

    Anything other than the active marker reads as suspended.
    """
    if len(args) < 1:
        raise ValueError("STATUS reply carries no argument")
    if args[0] == DaemonStatus.ACTIVE:
        return DaemonStatus.ACTIVE
    return DaemonStatus.SUSPENDED
