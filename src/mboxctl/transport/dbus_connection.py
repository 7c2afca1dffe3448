"""System D-Bus connection to the mbox daemon.

Each command is one blocking call of the daemon's ``cmd`` method, which
takes ``(y, ay)`` and returns ``(y, ay)``. The bus handle is opened once
per process run and released when the connection is closed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..protocol.errors import MboxError, TransportError
from ..protocol.message import BUS_SIGNATURE, Message, Reply, decode

logger = logging.getLogger(__name__)

DBUS_NAME = "org.openbmc.mboxd"
DBUS_OBJECT_PATH = "/org/openbmc/mboxd"
DBUS_INTERFACE = "org.openbmc.mboxd"
DBUS_METHOD = "cmd"


@dataclass(frozen=True)
class CallResult:
    """Outcome of :meth:`BusConnection.request`.

    Exactly one of (``status``, ``args``) or ``error`` is meaningful,
    selected by ``ok``.
    """

    ok: bool
    status: int = 0
    args: bytes = b""
    error: MboxError | None = None

    @classmethod
    def success(cls, status: int, args: bytes) -> CallResult:
        return cls(ok=True, status=status, args=args)

    @classmethod
    def failure(cls, error: MboxError) -> CallResult:
        return cls(ok=False, error=error)


class BusConnection:
    """Manages the system bus connection used to talk to the daemon.

    Usage::

        with BusConnection() as conn:
            result = conn.request(build_ping(), expected_num_args=0)
    """

    def __init__(
        self,
        service_name: str = DBUS_NAME,
        object_path: str = DBUS_OBJECT_PATH,
        interface_name: str = DBUS_INTERFACE,
        method_name: str = DBUS_METHOD,
        bus=None,
    ) -> None:
        self._service_name = service_name
        self._object_path = object_path
        self._interface_name = interface_name
        self._method_name = method_name
        self._bus = bus

    @property
    def connected(self) -> bool:
        return self._bus is not None

    def open(self) -> None:
        """Connect to the system bus.

        Raises:
            TransportError: If the bus cannot be opened.
        """
        if self._bus is not None:
            return

        try:
            import sdbus

            self._bus = sdbus.sd_bus_open_system()
        except Exception as e:
            raise TransportError(
                "connect", f"Failed to connect to the system bus: {e}"
            ) from e

        logger.debug("Connected to the system bus")

    def close(self) -> None:
        """Drop the bus handle; the underlying connection is unreferenced."""
        if self._bus is None:
            return
        self._bus = None
        logger.debug("Disconnected")

    def __enter__(self) -> BusConnection:
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def call(self, message: Message) -> Reply:
        """Send one request and block until the daemon replies.

        No timeout is applied beyond the bus library's own default.

        Raises:
            TransportError: If not connected, or if the request cannot be
                built, dispatched, or its reply read back.
        """
        if self._bus is None:
            raise TransportError("dispatch", "Not connected to the bus")

        try:
            request = self._bus.new_method_call_message(
                self._service_name,
                self._object_path,
                self._interface_name,
                self._method_name,
            )
        except Exception as e:
            raise TransportError("serialize", f"Failed to init method call: {e}") from e

        try:
            request.append_data(BUS_SIGNATURE, message.command, message.args)
        except Exception as e:
            raise TransportError(
                "serialize", f"Failed to add cmd and args to message: {e}"
            ) from e

        logger.debug("Sending %r", message)
        try:
            response = self._bus.call(request)
        except Exception as e:
            raise TransportError("dispatch", f"Failed to post message: {e}") from e

        try:
            status, args = response.get_contents()
            reply = Reply(int(status), bytes(args))
        except Exception as e:
            raise TransportError("read", f"Failed to read response: {e}") from e

        logger.debug("Received %r", reply)
        return reply

    def request(self, message: Message, expected_num_args: int = 0) -> CallResult:
        """Call the daemon and validate the reply length.

        Returns:
            A successful ``CallResult`` holding the status byte and the first
            ``expected_num_args`` reply bytes, or a failed one holding the
            ``TransportError`` or ``MalformedResponseError``.
        """
        try:
            status, args = decode(expected_num_args, self.call(message))
        except MboxError as e:
            return CallResult.failure(e)
        return CallResult.success(status, args)
