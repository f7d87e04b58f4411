"""MQTT topic names."""

from __future__ import annotations

from functools import total_ordering

__all__ = ["TopicName"]

_MAX_TOPIC_LENGTH = 65535


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


@total_ordering
class TopicName:
    """An MQTT topic name: a string without wildcards that messages are published on."""

    __slots__ = ("_name",)

    def __init__(self, name: str | TopicName = "") -> None:
        self._name = name.name if isinstance(name, TopicName) else str(name)

    @property
    def name(self) -> str:
        """The topic name as a string."""
        return self._name

    def is_valid(self) -> bool:
        """Return True if the name is valid according to MQTT section 4.7."""
        length = _utf16_length(self._name)
        return (
            0 < length <= _MAX_TOPIC_LENGTH
            and "#" not in self._name
            and "+" not in self._name
            and "\0" not in self._name
        )

    def level_count(self) -> int:
        """Return the total number of topic levels."""
        return self._name.count("/") + 1 if self._name else 0

    def levels(self) -> list[str]:
        """Return the topic levels, keeping empty ones."""
        return self._name.split("/")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TopicName):
            return self._name == other._name
        if isinstance(other, str):
            return self._name == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, TopicName):
            return self._name < other._name
        if isinstance(other, str):
            return self._name < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"TopicName({self._name!r})"