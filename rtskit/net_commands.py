"""Commands passed from the game to the networking thread."""

import enum
import struct
from dataclasses import dataclass

from rtskit.errors import InvariantError, check

NET_COMMAND_MAX_LENGTH = 512

_TYPE = struct.Struct("<i")


class NetCommandType(enum.IntEnum):
    SHUTDOWN = 0
    SEND = 1


@dataclass(frozen=True)
class SendNetCommand:
    message: bytes


def serialize_shutdown():
    """Encode a shutdown command."""
    return _TYPE.pack(NetCommandType.SHUTDOWN)


def serialize_send(message):
    """Encode a command to send ``message`` to the server."""
    return _TYPE.pack(NetCommandType.SEND) + bytes(message)


def command_type(data):
    """Return the type of an encoded command."""
    check(len(data) >= _TYPE.size, "command too short")
    (value,) = _TYPE.unpack_from(data)
    try:
        return NetCommandType(value)
    except ValueError:
        raise InvariantError(f"unknown net command type {value}") from None


def parse_send(data):
    """Decode a send command."""
    check(command_type(data) is NetCommandType.SEND, "not a send command")
    return SendNetCommand(bytes(data[_TYPE.size:]))