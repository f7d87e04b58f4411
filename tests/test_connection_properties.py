import pytest

from mqttcore.connection_properties import (
    ConnectionProperties,
    LastWillProperties,
    ServerConnectionProperties,
    ServerPropertyDetail,
)
from mqttcore.types import PayloadFormatIndicator, ReasonCode, StringPair, UserProperties


def test_user_properties_get_set():
    p = ConnectionProperties()
    assert p.user_properties == UserProperties()
    properties = UserProperties([StringPair("someKey", "someValue")])
    p.user_properties = properties
    assert p.user_properties == properties


def test_authentication_get_set():
    p = ConnectionProperties()
    assert p.authentication_method == ""
    p.authentication_method = "SomeAuthentication"
    assert p.authentication_method == "SomeAuthentication"
    assert p.authentication_data == b""
    p.authentication_data = b"AuthData123"
    assert p.authentication_data == b"AuthData123"


def test_session_expiry_interval():
    p = ConnectionProperties()
    assert p.session_expiry_interval == 0
    p.session_expiry_interval = 1000
    assert p.session_expiry_interval == 1000


def test_maximum_packet_size():
    p = ConnectionProperties()
    assert p.maximum_packet_size == 0xFFFFFFFF
    with pytest.raises(ValueError):
        p.maximum_packet_size = 0
    assert p.maximum_packet_size == 0xFFFFFFFF
    p.maximum_packet_size = 500
    assert p.maximum_packet_size == 500


def test_maximum_receive():
    p = ConnectionProperties()
    assert p.maximum_receive == 65535
    with pytest.raises(ValueError):
        p.maximum_receive = 0
    assert p.maximum_receive == 65535
    p.maximum_receive = 30
    assert p.maximum_receive == 30


def test_maximum_receive_out_of_range():
    with pytest.raises(ValueError):
        ConnectionProperties(maximum_receive=70000)


def test_topic_alias_and_information_flags():
    p = ConnectionProperties()
    assert p.maximum_topic_alias == 0
    p.maximum_topic_alias = 5
    assert p.maximum_topic_alias == 5
    assert p.request_response_information is False
    p.request_response_information = True
    assert p.request_response_information is True
    assert p.request_problem_information is True
    p.request_problem_information = False
    assert p.request_problem_information is False


def test_user_properties_are_copied():
    p = ConnectionProperties()
    returned = p.user_properties
    returned.append(StringPair("k", "v"))
    assert p.user_properties == UserProperties()


def test_last_will_defaults_and_set():
    will = LastWillProperties()
    assert will.will_delay_interval == 0
    assert will.payload_format_indicator == PayloadFormatIndicator.UNSPECIFIED
    will.will_delay_interval = 30
    will.content_type = "text/plain"
    will.correlation_data = b"abc"
    assert (will.will_delay_interval, will.content_type, will.correlation_data) == (
        30,
        "text/plain",
        b"abc",
    )


def test_server_properties_defaults():
    server = ServerConnectionProperties()
    assert server.is_valid() is False
    assert server.available_properties == ServerPropertyDetail.NONE
    assert server.maximum_qos == 2
    assert server.retain_available is True
    assert server.wildcard_supported is True
    assert server.subscription_identifier_supported is True
    assert server.shared_subscription_supported is True
    assert server.client_id_assigned() is False
    assert server.reason_code == ReasonCode.SUCCESS


def test_server_properties_reported_values():
    server = ServerConnectionProperties(
        available_properties=ServerPropertyDetail.ASSIGNED_CLIENT_ID
        | ServerPropertyDetail.MAXIMUM_QOS,
        valid=True,
        maximum_qos=1,
        server_keep_alive=60,
        server_reference="other.example.com",
        maximum_topic_alias=10,
    )
    assert server.is_valid() is True
    assert server.client_id_assigned() is True
    assert ServerPropertyDetail.MAXIMUM_QOS in server.available_properties
    assert ServerPropertyDetail.RETAIN_AVAILABLE not in server.available_properties
    assert server.maximum_qos == 1
    assert server.server_keep_alive == 60
    assert server.server_reference == "other.example.com"
    assert server.maximum_topic_alias == 10


def test_server_property_detail_values():
    assert ServerPropertyDetail(0x10) is ServerPropertyDetail.RETAIN_AVAILABLE
    assert ServerPropertyDetail(0x20000) is ServerPropertyDetail.AUTHENTICATION_DATA