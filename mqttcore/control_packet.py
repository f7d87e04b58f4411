"""Building and serialising MQTT control packets."""

from __future__ import annotations

import logging
import struct
from enum import IntEnum

__all__ = ["PacketType", "ControlPacket", "encode_variable_integer"]

_log = logging.getLogger(__name__)

MAX_VARIABLE_INTEGER = 268435455


class PacketType(IntEnum):
    """Control packet types as placed in the upper nibble of the fixed header."""

    UNKNOWN = 0x00
    CONNECT = 0x10
    CONNACK = 0x20
    PUBLISH = 0x30
    PUBACK = 0x40
    PUBREC = 0x50
    PUBREL = 0x60
    PUBCOMP = 0x70
    SUBSCRIBE = 0x80
    SUBACK = 0x90
    UNSUBSCRIBE = 0xA0
    UNSUBACK = 0xB0
    PINGREQ = 0xC0
    PINGRESP = 0xD0
    DISCONNECT = 0xE0
    AUTH = 0xF0


def encode_variable_integer(value: int) -> bytes:
    """Encode a non-negative integer as an MQTT variable byte integer."""
    if value < 0:
        raise ValueError("variable integer must not be negative")
    if value > MAX_VARIABLE_INTEGER:
        _log.debug("Encoding a variable integer beyond the protocol maximum.")
    out = bytearray()
    while True:
        byte = value % 128
        value //= 128
        if value > 0:
            byte |= 0x80
        out.append(byte)
        if value == 0:
            return bytes(out)


class ControlPacket:
    """A control packet: a header byte followed by a growing payload."""

    __slots__ = ("_header", "_payload")

    def __init__(self, header: int = 0, payload: bytes = b"") -> None:
        self._header = int(header)
        self._payload = bytearray(payload)

    @property
    def header(self) -> int:
        """The fixed header byte."""
        return self._header

    @property
    def payload(self) -> bytes:
        """The payload accumulated so far."""
        return bytes(self._payload)

    def clear(self) -> None:
        """Reset the header to zero and drop the payload."""
        self._header = 0
        self._payload.clear()

    def set_header(self, header: int) -> None:
        """Set the header; values that are no valid packet type become UNKNOWN."""
        if header < PacketType.CONNECT or header > PacketType.DISCONNECT or header & 0x0F:
            self._header = PacketType.UNKNOWN
        else:
            self._header = header

    def append_byte(self, value: int) -> None:
        """Append one byte."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        self._payload.append(value)

    def append_uint16(self, value: int) -> None:
        """Append a big-endian 16-bit integer."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"16-bit value out of range: {value}")
        self._payload += struct.pack(">H", value)

    def append_uint32(self, value: int) -> None:
        """Append a big-endian 32-bit integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"32-bit value out of range: {value}")
        self._payload += struct.pack(">I", value)

    def append_data(self, data: bytes) -> None:
        """Append binary data prefixed with its 16-bit length."""
        self.append_uint16(len(data))
        self._payload += data

    def append_raw(self, data: bytes) -> None:
        """Append data without a length prefix."""
        self._payload += data

    def append_variable_integer(self, value: int) -> None:
        """Append a variable byte integer."""
        self._payload += encode_variable_integer(value)

    def serialize(self) -> bytes:
        """Return the whole packet: header, remaining length and payload."""
        return bytes([self._header]) + self.serialize_payload()

    def serialize_payload(self) -> bytes:
        """Return the remaining length followed by the payload."""
        if len(self._payload) > MAX_VARIABLE_INTEGER:
            _log.debug("Serialising a packet bigger than the maximum size.")
        return encode_variable_integer(len(self._payload)) + bytes(self._payload)