"""Subscriptions to topic filters and the notifications they deliver."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Iterable, Protocol

from mqttcore.message import Message
from mqttcore.topic_filter import TopicFilter
from mqttcore.types import ReasonCode, UserProperties

__all__ = ["SubscriptionState", "Subscription"]


class SubscriptionState(IntEnum):
    """The states a subscription passes through."""

    UNSUBSCRIBED = 0
    SUBSCRIPTION_PENDING = 1
    SUBSCRIBED = 2
    UNSUBSCRIPTION_PENDING = 3
    ERROR = 4


class _Unsubscriber(Protocol):
    def unsubscribe(self, topic: TopicFilter) -> Any: ...


class Subscription:
    """Receives messages from a broker for one topic filter.

    Listeners are registered with on_state_changed, on_qos_changed and
    on_message_received. The subscription can be used as a context manager;
    leaving the block unsubscribes if it is still subscribed.
    """

    def __init__(
        self,
        topic: TopicFilter | str = "",
        qos: int = 0,
        *,
        client: _Unsubscriber | None = None,
        shared: bool = False,
        shared_subscription_name: str = "",
        reason: str = "",
        reason_code: ReasonCode = ReasonCode.SUCCESS,
        user_properties: Iterable | None = None,
    ) -> None:
        self._topic = TopicFilter(topic)
        self._qos = qos
        self.client = client
        self.shared = shared
        self.shared_subscription_name = shared_subscription_name
        self.reason = reason
        self.reason_code = ReasonCode(reason_code)
        self._user_properties = UserProperties(user_properties or ())
        self._state = SubscriptionState.UNSUBSCRIBED
        self._state_listeners: list[Callable[[SubscriptionState], Any]] = []
        self._qos_listeners: list[Callable[[int], Any]] = []
        self._message_listeners: list[Callable[[Message], Any]] = []

    @property
    def topic(self) -> TopicFilter:
        """The topic filter of the subscription."""
        return self._topic

    @topic.setter
    def topic(self, topic: TopicFilter | str) -> None:
        self._topic = TopicFilter(topic)

    @property
    def state(self) -> SubscriptionState:
        """The current state; changing it notifies the state listeners."""
        return self._state

    @state.setter
    def state(self, state: SubscriptionState) -> None:
        state = SubscriptionState(state)
        if state == self._state:
            return
        self._state = state
        for callback in list(self._state_listeners):
            callback(state)

    @property
    def qos(self) -> int:
        """The maximum QoS level at which messages are received.

        Assigning a different level notifies the QoS listeners.
        """
        return self._qos

    @qos.setter
    def qos(self, qos: int) -> None:
        if qos == self._qos:
            return
        self._qos = qos
        for callback in list(self._qos_listeners):
            callback(qos)

    @property
    def user_properties(self) -> UserProperties:
        """A copy of the user properties sent by the broker on acceptance."""
        return UserProperties(self._user_properties)

    @user_properties.setter
    def user_properties(self, properties: Iterable) -> None:
        self._user_properties = UserProperties(properties)

    def on_state_changed(
        self, callback: Callable[[SubscriptionState], Any]
    ) -> Callable[[SubscriptionState], Any]:
        """Register a callback for state changes and return it."""
        self._state_listeners.append(callback)
        return callback

    def on_qos_changed(self, callback: Callable[[int], Any]) -> Callable[[int], Any]:
        """Register a callback for QoS changes and return it."""
        self._qos_listeners.append(callback)
        return callback

    def on_message_received(
        self, callback: Callable[[Message], Any]
    ) -> Callable[[Message], Any]:
        """Register a callback for received messages and return it."""
        self._message_listeners.append(callback)
        return callback

    def deliver(self, message: Message) -> None:
        """Hand a received message to every message listener."""
        for callback in list(self._message_listeners):
            callback(message)

    def unsubscribe(self) -> None:
        """Ask the owning client to unsubscribe from the topic."""
        if self.client is None:
            raise RuntimeError("subscription is not attached to a client")
        self.client.unsubscribe(self._topic)

    def close(self) -> None:
        """Unsubscribe if the subscription is still active."""
        if self._state == SubscriptionState.SUBSCRIBED:
            self.unsubscribe()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Subscription(topic={self._topic.filter!r}, qos={self._qos}, "
            f"state={self._state.name})"
        )