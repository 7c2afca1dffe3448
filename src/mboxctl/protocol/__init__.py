"""Protocol layer: wire messages, command builders, and response parsing."""

from .errors import MboxError, TransportError, MalformedResponseError
from .message import Message, Reply, decode
from .commands import Command, ResumeFlag, encode
from .parser import ResponseCode, DaemonStatus, parse_error, exit_code
