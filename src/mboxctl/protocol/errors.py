"""Exceptions raised by the codec and the bus transport."""

from __future__ import annotations


class MboxError(Exception):
    """Base for all mboxctl protocol failures."""


class TransportError(MboxError):
    """The bus call could not be completed.

    ``stage`` names the step that failed: ``connect``, ``serialize``,
    ``dispatch`` or ``read``.
    """

    def __init__(self, stage: str, reason: str):
        super().__init__(f"{stage} failed: {reason}")
        self.stage = stage
        self.reason = reason


class MalformedResponseError(MboxError):
    """The daemon replied with fewer argument bytes than the command needs."""

    def __init__(self, expected: int, received: int):
        super().__init__(
            f"Command returned insufficient response args "
            f"(expected {expected}, got {received})"
        )
        self.expected = expected
        self.received = received
