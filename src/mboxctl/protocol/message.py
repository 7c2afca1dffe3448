"""Wire message model for the daemon's ``cmd`` method.

Both directions share one shape::

    +--------------+----------------------------+
    | Command/Code | Arguments                  |
    | ``y`` 1 byte | ``ay`` variable byte array |
    +--------------+----------------------------+

- Request: the first field is the command byte.
- Reply: the first field is the daemon's response code (0 on success).
- The argument count is implicit in the array length.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MalformedResponseError

BUS_SIGNATURE = "yay"


@dataclass(frozen=True)
class Message:
    """A request for one bus call."""

    command: int
    args: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.command <= 0xFF:
            raise ValueError(f"Command must fit in one byte, got {self.command}")
        object.__setattr__(self, "args", bytes(self.args))

    @property
    def num_args(self) -> int:
        return len(self.args)

    def __repr__(self) -> str:
        return (
            f"Message(command=0x{self.command:02X}, "
            f"args={self.args.hex(' ') if self.args else '(empty)'})"
        )


@dataclass(frozen=True)
class Reply:
    """A reply as read back from the bus, before its arguments are checked."""

    status: int
    args: bytes = b""

    def __repr__(self) -> str:
        return (
            f"Reply(status=0x{self.status:02X}, "
            f"args={self.args.hex(' ') if self.args else '(empty)'})"
        )


def decode(expected_num_args: int, reply: Reply) -> tuple[int, bytes]:
    """Validate a reply and return its status byte and arguments.

    Args:
        expected_num_args: Number of argument bytes the command replies with.
        reply: The raw reply.

    Returns:
        ``(status, args)`` where ``args`` holds exactly the first
        ``expected_num_args`` bytes; any extra bytes are dropped.

    Raises:
        MalformedResponseError: If fewer than ``expected_num_args`` bytes
            were received.
    """
    if len(reply.args) < expected_num_args:
        raise MalformedResponseError(expected_num_args, len(reply.args))
    return reply.status, reply.args[:expected_num_args]
