"""MQTT topic names and filters, control packets, messages, subscriptions and property sets."""

__version__ = "0.1.0"

__all__ = [
    "connection_properties",
    "control_packet",
    "message",
    "publish_properties",
    "subscription",
    "subscription_properties",
    "topic_filter",
    "topic_name",
    "types",
]