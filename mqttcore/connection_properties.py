"""Properties exchanged with the server when a connection is established."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterable

from mqttcore.types import PayloadFormatIndicator, ReasonCode, UserProperties

__all__ = [
    "LastWillProperties",
    "ConnectionProperties",
    "ServerPropertyDetail",
    "ServerConnectionProperties",
]

_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF


@dataclass
class LastWillProperties:
    """MQTT 5.0 options attached to the last will of a client."""

    will_delay_interval: int = 0
    payload_format_indicator: PayloadFormatIndicator = PayloadFormatIndicator.UNSPECIFIED
    message_expiry_interval: int = 0
    content_type: str = ""
    response_topic: str = ""
    correlation_data: bytes = b""
    user_properties: UserProperties = field(default_factory=UserProperties)


class ConnectionProperties:
    """MQTT 5.0 options a client passes to the server when connecting."""

    def __init__(
        self,
        *,
        session_expiry_interval: int = 0,
        maximum_receive: int = _UINT16_MAX,
        maximum_packet_size: int = _UINT32_MAX,
        maximum_topic_alias: int = 0,
        request_response_information: bool = False,
        request_problem_information: bool = True,
        user_properties: Iterable | None = None,
        authentication_method: str = "",
        authentication_data: bytes = b"",
    ) -> None:
        self.session_expiry_interval = session_expiry_interval
        self._maximum_receive = _UINT16_MAX
        self._maximum_packet_size = _UINT32_MAX
        self.maximum_receive = maximum_receive
        self.maximum_packet_size = maximum_packet_size
        self.maximum_topic_alias = maximum_topic_alias
        self.request_response_information = request_response_information
        self.request_problem_information = request_problem_information
        self._user_properties = UserProperties(user_properties or ())
        self.authentication_method = authentication_method
        self.authentication_data = bytes(authentication_data)

    @property
    def maximum_receive(self) -> int:
        """How many QoS 1 and 2 publications may be processed concurrently."""
        return self._maximum_receive

    @maximum_receive.setter
    def maximum_receive(self, value: int) -> None:
        if value == 0:
            raise ValueError("Maximum Receive is not allowed to be 0.")
        if not 0 < value <= _UINT16_MAX:
            raise ValueError(f"Maximum Receive out of range: {value}")
        self._maximum_receive = value

    @property
    def maximum_packet_size(self) -> int:
        """The largest packet, header and properties included, to be accepted."""
        return self._maximum_packet_size

    @maximum_packet_size.setter
    def maximum_packet_size(self, value: int) -> None:
        if value == 0:
            raise ValueError("Packet size is not allowed to be 0.")
        if not 0 < value <= _UINT32_MAX:
            raise ValueError(f"Packet size out of range: {value}")
        self._maximum_packet_size = value

    @property
    def user_properties(self) -> UserProperties:
        """A copy of the user properties of the connection."""
        return UserProperties(self._user_properties)

    @user_properties.setter
    def user_properties(self, properties: Iterable) -> None:
        self._user_properties = UserProperties(properties)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(session_expiry_interval={self.session_expiry_interval}, "
            f"maximum_receive={self._maximum_receive}, "
            f"maximum_packet_size={self._maximum_packet_size}, "
            f"maximum_topic_alias={self.maximum_topic_alias})"
        )


class ServerPropertyDetail(IntFlag):
    """Flags naming the properties a server has sent."""

    NONE = 0x00000000
    SESSION_EXPIRY_INTERVAL = 0x00000001
    MAXIMUM_RECEIVE = 0x00000002
    MAXIMUM_QOS = 0x00000004
    RETAIN_AVAILABLE = 0x00000010
    MAXIMUM_PACKET_SIZE = 0x00000020
    ASSIGNED_CLIENT_ID = 0x00000040
    MAXIMUM_TOPIC_ALIAS = 0x00000080
    REASON_STRING = 0x00000100
    USER_PROPERTY = 0x00000200
    WILDCARD_SUPPORTED = 0x00000400
    SUBSCRIPTION_IDENTIFIER_SUPPORT = 0x00000800
    SHARED_SUBSCRIPTION_SUPPORT = 0x00001000
    SERVER_KEEP_ALIVE = 0x00002000
    RESPONSE_INFORMATION = 0x00004000
    SERVER_REFERENCE = 0x00008000
    AUTHENTICATION_METHOD = 0x00010000
    AUTHENTICATION_DATA = 0x00020000


class ServerConnectionProperties(ConnectionProperties):
    """Connection properties reported by the server in its acknowledgment.

    Properties the server did not send keep their default values; the
    available_properties flags tell which ones were sent.
    """

    def __init__(
        self,
        *,
        available_properties: ServerPropertyDetail = ServerPropertyDetail.NONE,
        valid: bool = False,
        maximum_qos: int = 2,
        retain_available: bool = True,
        reason: str = "",
        reason_code: ReasonCode = ReasonCode.SUCCESS,
        wildcard_supported: bool = True,
        subscription_identifier_supported: bool = True,
        shared_subscription_supported: bool = True,
        server_keep_alive: int = 0,
        response_information: str = "",
        server_reference: str = "",
        **connection_properties,
    ) -> None:
        super().__init__(**connection_properties)
        self._details = ServerPropertyDetail(available_properties)
        self._valid = bool(valid)
        self._maximum_qos = maximum_qos
        self._retain_available = retain_available
        self._reason = reason
        self._reason_code = ReasonCode(reason_code)
        self._wildcard_supported = wildcard_supported
        self._subscription_identifier_supported = subscription_identifier_supported
        self._shared_subscription_supported = shared_subscription_supported
        self._server_keep_alive = server_keep_alive
        self._response_information = response_information
        self._server_reference = server_reference

    @property
    def available_properties(self) -> ServerPropertyDetail:
        """The properties specified by the server."""
        return self._details

    def is_valid(self) -> bool:
        """Return True if the server sent properties with its acknowledgment."""
        return self._valid

    def client_id_assigned(self) -> bool:
        """Return True if the server assigned a client identifier."""
        return ServerPropertyDetail.ASSIGNED_CLIENT_ID in self._details

    @property
    def maximum_qos(self) -> int:
        """The highest QoS level the server accepts for publishing."""
        return self._maximum_qos

    @property
    def retain_available(self) -> bool:
        """Whether the server accepts retained messages."""
        return self._retain_available

    @property
    def reason(self) -> str:
        """The reason string of the response."""
        return self._reason

    @property
    def reason_code(self) -> ReasonCode:
        """The reason code of the response."""
        return self._reason_code

    @property
    def wildcard_supported(self) -> bool:
        """Whether subscriptions with wildcards are accepted."""
        return self._wildcard_supported

    @property
    def subscription_identifier_supported(self) -> bool:
        """Whether subscription identifiers are accepted."""
        return self._subscription_identifier_supported

    @property
    def shared_subscription_supported(self) -> bool:
        """Whether shared subscriptions are accepted."""
        return self._shared_subscription_supported

    @property
    def server_keep_alive(self) -> int:
        """The keep alive in seconds requested by the server."""
        return self._server_keep_alive

    @property
    def response_information(self) -> str:
        """The response information sent by the server."""
        return self._response_information

    @property
    def server_reference(self) -> str:
        """An alternative server address for the client to connect to."""
        return self._server_reference