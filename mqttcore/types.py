"""Basic MQTT 5.0 data types: enumerations, string pairs and user properties."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "PayloadFormatIndicator",
    "MessageStatus",
    "ReasonCode",
    "StringPair",
    "UserProperties",
]


class PayloadFormatIndicator(IntEnum):
    """Describes the content of a message payload."""

    UNSPECIFIED = 0
    UTF8_ENCODED = 1


class MessageStatus(IntEnum):
    """States a message passes through depending on its QoS level and role."""

    UNKNOWN = 0
    PUBLISHED = 1
    ACKNOWLEDGED = 2
    RECEIVED = 3
    RELEASED = 4
    COMPLETED = 5


class ReasonCode(IntEnum):
    """Reason codes defined by the MQTT 5.0 standard."""

    SUCCESS = 0x00
    SUBSCRIPTION_QOS_LEVEL0 = 0x00
    SUBSCRIPTION_QOS_LEVEL1 = 0x01
    SUBSCRIPTION_QOS_LEVEL2 = 0x02
    NO_MATCHING_SUBSCRIBER = 0x10
    NO_SUBSCRIPTION_EXISTED = 0x11
    CONTINUE_AUTHENTICATION = 0x18
    RE_AUTHENTICATE = 0x19
    UNSPECIFIED_ERROR = 0x80
    MALFORMED_PACKET = 0x81
    PROTOCOL_ERROR = 0x82
    IMPLEMENTATION_SPECIFIC_ERROR = 0x83
    UNSUPPORTED_PROTOCOL_VERSION = 0x84
    INVALID_CLIENT_ID = 0x85
    INVALID_USER_NAME_OR_PASSWORD = 0x86
    NOT_AUTHORIZED = 0x87
    SERVER_NOT_AVAILABLE = 0x88
    SERVER_BUSY = 0x89
    CLIENT_BANNED = 0x8A
    INVALID_AUTHENTICATION_METHOD = 0x8C
    INVALID_TOPIC_FILTER = 0x8F
    INVALID_TOPIC_NAME = 0x90
    MESSAGE_ID_IN_USE = 0x91
    MESSAGE_ID_NOT_FOUND = 0x92
    PACKET_TOO_LARGE = 0x95
    QUOTA_EXCEEDED = 0x97
    INVALID_PAYLOAD_FORMAT = 0x99
    RETAIN_NOT_SUPPORTED = 0x9A
    QOS_NOT_SUPPORTED = 0x9B
    USE_ANOTHER_SERVER = 0x9C
    SERVER_MOVED = 0x9D
    SHARED_SUBSCRIPTIONS_NOT_SUPPORTED = 0x9E
    EXCEEDED_CONNECTION_RATE = 0x9F
    SUBSCRIPTION_IDS_NOT_SUPPORTED = 0xA1
    WILDCARD_SUBSCRIPTIONS_NOT_SUPPORTED = 0xA2


class StringPair:
    """A name-value pair as used by MQTT 5.0 user properties."""

    __slots__ = ("name", "value")

    def __init__(self, name: str = "", value: str = "") -> None:
        self.name = name
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringPair):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    __hash__ = None  # mutable, therefore unhashable

    def __repr__(self) -> str:
        return f"StringPair({self.name} : {self.value})"


class UserProperties(list):
    """An ordered list of StringPair values passed along with MQTT packets."""