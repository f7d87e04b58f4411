# mqttcore

Plain-Python building blocks for MQTT 3.1.1 and MQTT 5.0 clients. It gives
you the data types a client works with:

- `mqttcore.topic_name.TopicName` and `mqttcore.topic_filter.TopicFilter`.
  These check names and filters against the MQTT rules and match a filter
  against a name. Matching covers `+`, `#`, `$`-topics (through
  `MatchOption`) and `$share/...` shared subscriptions.
- `mqttcore.control_packet.ControlPacket`. It builds a packet from a header
  byte and a payload and serializes it with the MQTT remaining-length
  encoding. The encoding is also available on its own as
  `encode_variable_integer`. Packet types are listed in `PacketType`.
- `mqttcore.message.Message`, an immutable description of a received
  publication. Messages compare equal only to themselves.
- MQTT 5.0 property sets:
  - `PublishProperties` and `MessageStatusProperties` in
    `mqttcore.publish_properties`.
  - `SubscriptionProperties` and `UnsubscriptionProperties` in
    `mqttcore.subscription_properties`.
  - `LastWillProperties`, `ConnectionProperties` and
    `ServerConnectionProperties` in `mqttcore.connection_properties`.
- `mqttcore.subscription.Subscription`. It tracks the `SubscriptionState` of
  a subscription and passes state, QoS and message notifications to
  registered callbacks.
- Shared types in `mqttcore.types`:
  - the enumerations `PayloadFormatIndicator`, `MessageStatus` and
    `ReasonCode`;
  - `StringPair`;
  - `UserProperties`, a list of `StringPair`.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install .[test]
pytest
```

## Topic matching

```python
from mqttcore.topic_filter import MatchOption, TopicFilter
from mqttcore.topic_name import TopicName

flt = TopicFilter("sport/tennis/+")
flt.is_valid()                                        # True
flt.match(TopicName("sport/tennis/player1"))          # True
flt.match(TopicName("sport/tennis/player1/ranking"))  # False

TopicFilter("#").match(TopicName("$SYS/foo"),
                       MatchOption.WILDCARDS_DONT_MATCH_DOLLAR_TOPIC)  # False

TopicFilter("$share/group/topic/#").shared_subscription_name()  # "group"

TopicName("a/b/c").levels()       # ["a", "b", "c"]
TopicName("a/b/c").level_count()  # 3
```

`match` also accepts a plain string as the topic name. Topic names and
filters compare equal to each other's plain strings, sort by their text and
can be used as dictionary keys.

## Building packets

```python
from mqttcore.control_packet import ControlPacket, PacketType, encode_variable_integer

packet = ControlPacket(PacketType.SUBACK)
packet.append_uint16(1)
packet.append_byte(1)
packet.serialize()   # b"\x90\x03\x00\x01\x01"

encode_variable_integer(321)  # b"\xc1\x02"
```

`append_data` writes a 16-bit length prefix before the bytes, and
`append_raw` writes the bytes alone. The methods `append_byte`,
`append_uint16` and `append_uint32` raise `ValueError` for values out of
range. `set_header` replaces any value that is not a valid packet type with
`PacketType.UNKNOWN`.

## MQTT 5.0 properties

```python
from mqttcore.publish_properties import PublishProperties, PublishPropertyDetail
from mqttcore.types import PayloadFormatIndicator, StringPair, UserProperties

props = PublishProperties()
props.payload_format_indicator = PayloadFormatIndicator.UTF8_ENCODED
props.user_properties = UserProperties([StringPair("key", "value")])
PublishPropertyDetail.USER_PROPERTY in props.available_properties  # True
```

Each property that is assigned on `PublishProperties` is recorded in
`available_properties`. Assigning a value the protocol forbids raises
`ValueError`, and the previous value stays in place. This applies to the
following:

- a topic alias of 0, or a list of subscription identifiers that contains 0;
- `maximum_receive` or `maximum_packet_size` of 0, or out of range, on
  `ConnectionProperties`.

`ConnectionProperties` uses the protocol defaults: a maximum receive of
65535, a maximum packet size of 4294967295, and request-problem-information
switched on. `ServerConnectionProperties` holds what a server reported. Its
defaults apply to every property the server did not send.
`available_properties` tells which properties were sent, and
`client_id_assigned()` tells whether the server assigned a client identifier.

## Subscriptions

```python
from mqttcore.message import Message
from mqttcore.subscription import Subscription, SubscriptionState

class Client:
    def unsubscribe(self, topic):
        print("unsubscribing from", topic)

with Subscription("sensors/+", 1, client=Client()) as sub:
    sub.on_message_received(lambda msg: print(msg.topic, msg.payload))
    sub.state = SubscriptionState.SUBSCRIBED
    sub.deliver(Message(topic="sensors/a", payload=b"21.5"))
# leaving the block calls Client.unsubscribe, because the state is still SUBSCRIBED
```

Changing `state` or `qos` to a different value notifies the listeners that
were registered with `on_state_changed` or `on_qos_changed`.
`unsubscribe()` raises `RuntimeError` when the subscription has no client.

## What this package does not do

mqttcore opens no network connections and contains no client or broker.
`ControlPacket` builds and serializes packets, but nothing here parses
packets that arrive from a server. Sending, receiving, keep-alive, QoS
handshakes and session handling are left to the program that uses these
types.