"""Tests for command builders."""

import pytest

from mboxctl.protocol.commands import (
    REPLY_ARGS,
    REQUEST_ARGS,
    Command,
    ResumeFlag,
    build_flash_modified,
    build_ping,
    build_reset,
    build_resume,
    build_status,
    build_suspend,
    encode,
)


def test_command_enum_values():
    """Command bytes must match the daemon's."""
    assert Command.PING == 0x00
    assert Command.STATUS == 0x01
    assert Command.RESET == 0x02
    assert Command.SUSPEND == 0x03
    assert Command.RESUME == 0x04
    assert Command.FLASH_MODIFIED == 0x05


def test_resume_flag_values():
    assert ResumeFlag.NOT_MODIFIED == 0x00
    assert ResumeFlag.FLASH_MODIFIED == 0x01


def test_every_command_has_arity():
    """Both arity tables cover the whole command set."""
    assert set(REQUEST_ARGS) == set(Command)
    assert set(REPLY_ARGS) == set(Command)


@pytest.mark.parametrize(
    "builder, command",
    [
        (build_ping, Command.PING),
        (build_status, Command.STATUS),
        (build_reset, Command.RESET),
        (build_suspend, Command.SUSPEND),
        (build_flash_modified, Command.FLASH_MODIFIED),
    ],
)
def test_zero_argument_builders(builder, command):
    """Builders without arguments produce the command byte and no args."""
    message = builder()
    assert message.command == command
    assert message.num_args == 0
    assert message.args == b""


def test_build_resume_modified():
    """RESUME carries the flag as its only argument byte."""
    message = build_resume(ResumeFlag.FLASH_MODIFIED)
    assert message.command == Command.RESUME
    assert message.num_args == REQUEST_ARGS[Command.RESUME] == 1
    assert message.args == bytes([ResumeFlag.FLASH_MODIFIED])


def test_build_resume_not_modified():
    message = build_resume(ResumeFlag.NOT_MODIFIED)
    assert message.args == b"\x00"


def test_encode_wrong_arity():
    """Argument length must match the command's fixed arity."""
    with pytest.raises(ValueError):
        encode(Command.PING, b"\x01")
    with pytest.raises(ValueError):
        encode(Command.RESUME)
    with pytest.raises(ValueError):
        encode(Command.RESUME, b"\x00\x01")


def test_encode_unknown_command():
    with pytest.raises(ValueError):
        encode(0x42)


def test_encode_accepts_plain_int():
    message = encode(0x01)
    assert message.command == Command.STATUS


@pytest.mark.parametrize("arg, flag", [("0", ResumeFlag.NOT_MODIFIED), ("1", ResumeFlag.FLASH_MODIFIED)])
def test_resume_flag_from_arg(arg, flag):
    assert ResumeFlag.from_arg(arg) is flag


@pytest.mark.parametrize("arg", ["", "2", "01", "yes", " 1", None])
def test_resume_flag_rejects_other_input(arg):
    """Only exactly "0" or "1" is accepted."""
    with pytest.raises(ValueError):
        ResumeFlag.from_arg(arg)
