"""Properties passed to the server when subscribing or unsubscribing."""

from __future__ import annotations

from dataclasses import dataclass, field

from mqttcore.types import UserProperties

__all__ = ["SubscriptionProperties", "UnsubscriptionProperties"]


@dataclass
class SubscriptionProperties:
    """MQTT 5.0 options sent along with a subscription request."""

    subscription_identifier: int = 0
    user_properties: UserProperties = field(default_factory=UserProperties)
    no_local: bool = False


@dataclass
class UnsubscriptionProperties:
    """MQTT 5.0 options sent along with an unsubscription request."""

    user_properties: UserProperties = field(default_factory=UserProperties)