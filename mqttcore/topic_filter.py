"""MQTT topic filters and topic matching."""

from __future__ import annotations

from enum import IntFlag
from functools import total_ordering

from mqttcore.topic_name import TopicName

__all__ = ["MatchOption", "TopicFilter"]

_MAX_FILTER_LENGTH = 65535
_SHARE_PREFIX = "$share/"


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


class MatchOption(IntFlag):
    """Options that change how a filter matches topic names."""

    NO_MATCH_OPTION = 0x0000
    WILDCARDS_DONT_MATCH_DOLLAR_TOPIC = 0x0001


@total_ordering
class TopicFilter:
    """An MQTT topic filter, which may hold the wildcards '+' and '#'."""

    __slots__ = ("_filter",)

    def __init__(self, topic_filter: str | TopicFilter = "") -> None:
        if isinstance(topic_filter, TopicFilter):
            self._filter = topic_filter.filter
        else:
            self._filter = str(topic_filter)

    @property
    def filter(self) -> str:
        """The topic filter as a string."""
        return self._filter

    def shared_subscription_name(self) -> str:
        """Return the share name of a '$share/name/filter' filter, or ''."""
        if self._filter.startswith(_SHARE_PREFIX):
            return self._filter.split("/")[1]
        return ""

    def is_valid(self) -> bool:
        """Return True if the filter is valid according to MQTT section 4.7."""
        text = self._filter
        length = _utf16_length(text)
        if length == 0 or length > _MAX_FILTER_LENGTH or "\0" in text:
            return False
        if length == 1:
            return True

        size = len(text)

        # '#' must be last, on its own level, and occur at most once.
        multi = text.find("#")
        if multi != -1 and (multi != size - 1 or text[size - 2] != "/"):
            return False

        # '+' may occur multiple times but must be its own level.
        single = text.find("+")
        while single != -1:
            if (single != 0 and text[single - 1] != "/") or (
                single < size - 1 and text[single + 1] != "/"
            ):
                return False
            single = text.find("#", single + 1)

        # $share/shareName/TopicFilter needs a non-empty share name.
        if text.startswith(_SHARE_PREFIX):
            index = text.find("/", len(_SHARE_PREFIX))
            if index in (-1, len(_SHARE_PREFIX)):
                return False
        return True

    def match(
        self,
        name: TopicName | str,
        options: MatchOption = MatchOption.NO_MATCH_OPTION,
    ) -> bool:
        """Return True if the filter matches the topic name under the given options."""
        if not isinstance(name, TopicName):
            name = TopicName(name)
        if not name.is_valid() or not self.is_valid():
            return False

        topic = name.name
        text = self._filter
        if topic == text:
            return True

        if (
            MatchOption.WILDCARDS_DONT_MATCH_DOLLAR_TOPIC in MatchOption(options)
            and topic.startswith("$")
            and (text.startswith("+") or text in ("#", "/#"))
        ):
            return False

        if text.endswith("#"):
            root = text[:-1]
            if not root:
                return True
            if root.endswith("/"):  # '#' also stands for the parent level
                root = root[:-1]
            filter_levels = root.split("/")
            topic_levels = topic.split("/")
            if len(topic_levels) < len(filter_levels):
                return False
            return all(f == t for f, t in zip(filter_levels, topic_levels))

        if "+" in text:
            filter_levels = text.split("/")
            topic_levels = topic.split("/")
            if len(filter_levels) != len(topic_levels):
                return False
            return all(f in ("+", t) for f, t in zip(filter_levels, topic_levels))

        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TopicFilter):
            return self._filter == other._filter
        if isinstance(other, str):
            return self._filter == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, TopicFilter):
            return self._filter < other._filter
        if isinstance(other, str):
            return self._filter < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._filter)

    def __str__(self) -> str:
        return self._filter

    def __repr__(self) -> str:
        return f"TopicFilter({self._filter!r})"