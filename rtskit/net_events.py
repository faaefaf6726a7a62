"""Events passed from the networking thread to the game."""

import enum
from dataclasses import dataclass

from rtskit.bufview import MEMSIZE, U8, BufView
from rtskit.errors import InvariantError, check

NET_EVENT_MAX_LENGTH = 512


class NetEventType(enum.IntEnum):
    CONNECTION_ESTABLISHED = 0
    CONNECTION_FAILED = 1
    CONNECTION_LOST = 2
    MESSAGE = 3


@dataclass(frozen=True)
class MessageNetEvent:
    message: bytes


def _encode_type(event_type):
    check(0 <= event_type <= 0xFF, "event type does not fit in a byte")
    return U8.pack(event_type)


def _read_type(view):
    value = view.read_u8()
    try:
        return NetEventType(value)
    except ValueError:
        raise InvariantError(f"unknown net event type {value}") from None


def serialize_connection_established():
    return _encode_type(NetEventType.CONNECTION_ESTABLISHED)


def serialize_connection_lost():
    return _encode_type(NetEventType.CONNECTION_LOST)


def serialize_connection_failed():
    return _encode_type(NetEventType.CONNECTION_FAILED)


def serialize_message(message):
    """Encode an event carrying a message received from the server."""
    message = bytes(message)
    return _encode_type(NetEventType.MESSAGE) + MEMSIZE.pack(len(message)) + message


def event_type(data):
    """Return the type of an encoded event."""
    return _read_type(BufView(data))


def parse_message(data):
    """Decode a message event."""
    view = BufView(data)
    check(_read_type(view) is NetEventType.MESSAGE, "not a message event")
    length = view.read_memsize()
    return MessageNetEvent(view.read(length))