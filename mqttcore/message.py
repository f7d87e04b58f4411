"""Messages received from a broker."""

from __future__ import annotations

from dataclasses import dataclass, field

from mqttcore.publish_properties import PublishProperties
from mqttcore.topic_name import TopicName

__all__ = ["Message"]


@dataclass(frozen=True, eq=False)
class Message:
    """A message received for a subscription.

    Messages compare equal only to themselves.
    """

    topic: TopicName = field(default_factory=TopicName)
    payload: bytes = b""
    id: int = 0
    qos: int = 0
    duplicate: bool = False
    retain: bool = False
    publish_properties: PublishProperties = field(default_factory=PublishProperties)

    def __post_init__(self) -> None:
        if not isinstance(self.topic, TopicName):
            object.__setattr__(self, "topic", TopicName(self.topic))
        object.__setattr__(self, "payload", bytes(self.payload))