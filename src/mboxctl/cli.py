"""mboxctl - control the mbox flash-bridge daemon.

Usage:
    mboxctl --ping              - ping the daemon
    mboxctl --status            - check whether the daemon is active
    mboxctl --reset             - hard reset the daemon state
    mboxctl --point-to-flash    - point the LPC mapping back to flash
    mboxctl --suspend           - suspend the daemon to inhibit flash accesses
    mboxctl --resume 0|1        - resume the daemon, 1 if flash was modified
    mboxctl --flash-modified    - tell the daemon to discard its cache

The return value is 0 on success and the negated daemon response code
otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from . import NAME, SUBVERSION, VERSION
from .protocol.commands import (
    REPLY_ARGS,
    Command,
    ResumeFlag,
    build_flash_modified,
    build_ping,
    build_reset,
    build_resume,
    build_status,
    build_suspend,
)
from .protocol.errors import TransportError
from .protocol.message import Message
from .protocol.parser import (
    DaemonStatus,
    ResponseCode,
    exit_code,
    parse_daemon_status,
    parse_error,
)
from .transport.dbus_connection import BusConnection
from .utils.log import setup_logging

logger = logging.getLogger(__name__)

INVALID_REQUEST = exit_code(ResponseCode.INVALID_REQUEST)
INTERNAL_ERROR = exit_code(ResponseCode.INTERNAL_ERROR)


class UsageError(Exception):
    """The command line did not select exactly one valid command."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def _resume_flag(arg: str) -> ResumeFlag:
    try:
        return ResumeFlag.from_arg(arg)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="mboxctl",
        description="Control the mbox flash-bridge daemon over D-Bus.",
        add_help=False,
    )
    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--ping", dest="command", action="store_const", const=Command.PING,
        help="ping the daemon",
    )
    commands.add_argument(
        "--status", dest="command", action="store_const", const=Command.STATUS,
        help="check status of the daemon",
    )
    commands.add_argument(
        "--reset", dest="command", action="store_const", const=Command.RESET,
        help="hard reset the daemon state",
    )
    commands.add_argument(
        "--point-to-flash", dest="command", action="store_const", const=Command.RESET,
        help="point the lpc mapping back to flash",
    )
    commands.add_argument(
        "--suspend", dest="command", action="store_const", const=Command.SUSPEND,
        help="suspend the daemon to inhibit flash accesses",
    )
    commands.add_argument(
        "--resume", dest="resume_flag", metavar="MODIFIED", type=_resume_flag,
        help="resume the daemon; whether flash was modified (0 - no | 1 - yes)",
    )
    commands.add_argument(
        "--flash-modified", "--flash_modified", dest="command",
        action="store_const", const=Command.FLASH_MODIFIED,
        help="tell the daemon to discard its cache",
    )
    commands.add_argument(
        "--version", action="store_true", help="print the client version",
    )
    commands.add_argument(
        "-h", "--help", action="store_true", help="show this help message",
    )
    parser.add_argument(
        "--debug", action="store_true", help="log bus traffic",
    )
    return parser


# ─── COMMAND HANDLERS ────────────────────────────────────────────────

def _send(conn: BusConnection, message: Message, name: str):
    """Call the daemon, logging a transport or reply-shape failure.

    Returns the ``CallResult`` on success, or None after logging.
    """
    command = Command(message.command)
    result = conn.request(message, REPLY_ARGS[command])
    if not result.ok:
        logger.error("%s", result.error)
        logger.error("Failed to send %s command", name)
        return None
    return result


def _simple_command(conn: BusConnection, message: Message, name: str, label: str) -> int:
    result = _send(conn, message, name)
    if result is None:
        return INTERNAL_ERROR
    print(f"{label}: {parse_error(result.status)}")
    return exit_code(result.status)


def handle_ping(conn: BusConnection, args: argparse.Namespace) -> int:
    return _simple_command(conn, build_ping(), "ping", "Ping")


def handle_status(conn: BusConnection, args: argparse.Namespace) -> int:
    result = _send(conn, build_status(), "status")
    if result is None:
        return INTERNAL_ERROR

    if result.status != ResponseCode.SUCCESS:
        logger.error("Status command failed")
        return exit_code(result.status)

    status = parse_daemon_status(result.args)
    print(f"Daemon Status: {'Active' if status is DaemonStatus.ACTIVE else 'Suspended'}")
    return 0


def handle_reset(conn: BusConnection, args: argparse.Namespace) -> int:
    return _simple_command(conn, build_reset(), "reset", "Reset")


def handle_suspend(conn: BusConnection, args: argparse.Namespace) -> int:
    return _simple_command(conn, build_suspend(), "suspend", "Suspend")


def handle_resume(conn: BusConnection, args: argparse.Namespace) -> int:
    return _simple_command(conn, build_resume(args.resume_flag), "resume", "Resume")


def handle_flash_modified(conn: BusConnection, args: argparse.Namespace) -> int:
    return _simple_command(
        conn, build_flash_modified(), "flash modified", "Flash Modified"
    )


HANDLERS: dict[Command, Callable[[BusConnection, argparse.Namespace], int]] = {
    Command.PING: handle_ping,
    Command.STATUS: handle_status,
    Command.RESET: handle_reset,
    Command.SUSPEND: handle_suspend,
    Command.RESUME: handle_resume,
    Command.FLASH_MODIFIED: handle_flash_modified,
}


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main(argv: list[str] | None = None, connection: BusConnection | None = None) -> int:
    """Run one command and return the process return value.

    Args:
        argv: Command-line arguments (default ``sys.argv[1:]``).
        connection: Bus connection to use instead of the system bus.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if args.resume_flag is not None:
            args.command = Command.RESUME
        if not (args.command is not None or args.version or args.help):
            raise UsageError("no command given")
    except UsageError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        parser.print_help()
        return INVALID_REQUEST

    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    if args.help:
        parser.print_help()
        return 0
    if args.version:
        print(f"{NAME} V{VERSION}.{SUBVERSION:02d}")
        return 0

    conn = connection if connection is not None else BusConnection()
    try:
        with conn:
            return HANDLERS[args.command](conn, args)
    except TransportError as e:
        logger.error("%s", e)
        logger.error("Failed to init dbus")
        return INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
