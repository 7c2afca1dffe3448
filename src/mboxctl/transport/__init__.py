"""Bus transport to the mbox daemon."""

from .dbus_connection import BusConnection, CallResult
