import pytest

from mqttcore.topic_name import TopicName


@pytest.mark.parametrize("name", ["a", "/", "a b", "a/b/c", "$SYS/foo", "sport/tennis/player1"])
def test_valid_names(name):
    assert TopicName(name).is_valid() is True


@pytest.mark.parametrize("name", ["", "a/#", "#", "+", "a/+/b", "a\0b", "\0\0\0"])
def test_invalid_names(name):
    assert TopicName(name).is_valid() is False


def test_length_limit():
    assert TopicName("a" * 65535).is_valid() is True
    assert TopicName("a" * 65536).is_valid() is False


def test_length_counted_in_utf16_units():
    wide = "\U0001F600" * 32768
    assert TopicName(wide).is_valid() is False
    assert TopicName("\U0001F600" * 100).is_valid() is True


def test_level_count_empty_is_zero():
    assert TopicName().level_count() == 0


@pytest.mark.parametrize("name", ["a", "/", "a/b/c", "a//b", "/finance", "sport/"])
def test_level_count_matches_levels(name):
    topic = TopicName(name)
    assert topic.level_count() == len(topic.levels())


@pytest.mark.parametrize("name", ["a/b/c", "a//b", "/finance", "sport/", ""])
def test_levels_round_trip(name):
    assert "/".join(TopicName(name).levels()) == name


def test_levels_keep_empty_parts():
    assert TopicName("a//b").levels() == ["a", "", "b"]
    assert TopicName("/").levels() == ["", ""]


def test_equality_and_copy():
    original = TopicName("a/b")
    copy = TopicName(original)
    assert copy == original
    assert copy == "a/b"
    assert TopicName("a/b") != TopicName("a/c")


def test_ordering_is_lexical():
    names = [TopicName("b"), TopicName("a/c"), TopicName("a/b")]
    assert [n.name for n in sorted(names)] == ["a/b", "a/c", "b"]
    assert TopicName("a") < TopicName("b")
    assert TopicName("b") > TopicName("a")


def test_usable_as_dict_key():
    topic = TopicName("a/b")
    names = {topic: 42}
    assert names[TopicName("a/b")] == 42


def test_usable_in_list():
    topic = TopicName("a/b")
    names = [topic]
    assert names[0] == topic


def test_str_and_repr():
    topic = TopicName("a/b")
    assert str(topic) == "a/b"
    assert repr(topic) == "TopicName('a/b')"