"""Command constants and request builders.

Each command is identified by a single byte and has a fixed number of
request and reply argument bytes.
"""

from __future__ import annotations

from enum import IntEnum

from .message import Message


class Command(IntEnum):
    """Command identifiers understood by the daemon."""

    PING = 0x00
    STATUS = 0x01
    RESET = 0x02
    SUSPEND = 0x03
    RESUME = 0x04
    FLASH_MODIFIED = 0x05


class ResumeFlag(IntEnum):
    """Argument of RESUME: whether flash changed while suspended."""

    NOT_MODIFIED = 0x00
    FLASH_MODIFIED = 0x01

    @classmethod
    def from_arg(cls, arg: str | None) -> ResumeFlag:
        """Parse the command-line form of the flag ("0" or "1")."""
        if arg == "1":
            return cls.FLASH_MODIFIED
        if arg == "0":
            return cls.NOT_MODIFIED
        raise ValueError(f"Resume argument must be 0 or 1, got {arg!r}")


# Request argument bytes per command
REQUEST_ARGS: dict[Command, int] = {
    Command.PING: 0,
    Command.STATUS: 0,
    Command.RESET: 0,
    Command.SUSPEND: 0,
    Command.RESUME: 1,
    Command.FLASH_MODIFIED: 0,
}

# Reply argument bytes per command
REPLY_ARGS: dict[Command, int] = {
    Command.PING: 0,
    Command.STATUS: 1,
    Command.RESET: 0,
    Command.SUSPEND: 0,
    Command.RESUME: 0,
    Command.FLASH_MODIFIED: 0,
}


def encode(command: Command, args: bytes = b"") -> Message:
    """Build the request message for a command.

    Raises:
        ValueError: If ``command`` is not a known command or ``args`` does
            not have the command's fixed length.
    """
    try:
        command = Command(command)
    except ValueError:
        raise ValueError(f"Unknown command {command!r}") from None
    expected = REQUEST_ARGS[command]
    if len(args) != expected:
        raise ValueError(
            f"{command.name} takes {expected} argument byte(s), got {len(args)}"
        )
    return Message(command.value, bytes(args))


def build_ping() -> Message:
    return encode(Command.PING)


def build_status() -> Message:
    return encode(Command.STATUS)


def build_reset() -> Message:
    """Build a RESET, which also points the LPC mapping back at flash."""
    return encode(Command.RESET)


def build_suspend() -> Message:
    return encode(Command.SUSPEND)


def build_resume(flag: ResumeFlag) -> Message:
    """Build a RESUME command.

    Args:
        flag: Whether the flash was modified while the daemon was suspended.
    """
    return encode(Command.RESUME, bytes([ResumeFlag(flag)]))


def build_flash_modified() -> Message:
    """Build a FLASH_MODIFIED command telling the daemon to drop its cache."""
    return encode(Command.FLASH_MODIFIED)
