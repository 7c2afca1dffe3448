"""Shared fakes standing in for the sdbus bus and message objects."""

import logging

import pytest

from mboxctl.transport.dbus_connection import BusConnection
from mboxctl.utils.log import LOGGER_NAME


class FakeMessage:
    """Records appended data; returns preset contents when read."""

    def __init__(self, target=None, contents=None):
        self.target = target
        self.signature = None
        self.data = None
        self._contents = contents

    def append_data(self, signature, *args):
        self.signature = signature
        self.data = args

    def get_contents(self):
        return self._contents


class FakeBus:
    """Answers every method call with the same ``(status, args)`` reply."""

    def __init__(self, status=0, args=b"", call_error=None):
        self.reply = (status, args)
        self.call_error = call_error
        self.requests = []

    def new_method_call_message(self, *target):
        message = FakeMessage(target=target)
        self.requests.append(message)
        return message

    def call(self, message):
        if self.call_error is not None:
            raise self.call_error
        return FakeMessage(contents=self.reply)


@pytest.fixture
def fake_bus():
    return FakeBus()


@pytest.fixture
def connection(fake_bus):
    return BusConnection(bus=fake_bus)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop console handlers installed by a test so later tests start clean."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
