import copy

from mqttcore.subscription_properties import (
    SubscriptionProperties,
    UnsubscriptionProperties,
)
from mqttcore.types import StringPair, UserProperties


def _two_user_properties():
    props = UserProperties()
    props.append(StringPair("UserName1", "SomeValue"))
    props.append(StringPair("UserName2", "OtherValue"))
    return props


def test_get_set():
    properties = SubscriptionProperties()

    properties.subscription_identifier = 123
    assert properties.subscription_identifier == 123

    assert properties.no_local is False
    properties.no_local = True
    assert properties.no_local is True

    assert properties.user_properties == UserProperties()
    user = _two_user_properties()
    properties.user_properties = user
    assert properties.user_properties == user
    assert properties.user_properties[1] == StringPair("UserName2", "OtherValue")


def test_subscription_defaults():
    properties = SubscriptionProperties()
    assert properties.subscription_identifier == 0
    assert len(properties.user_properties) == 0
    assert properties.no_local is False


def test_defaults_are_not_shared():
    first = SubscriptionProperties()
    second = SubscriptionProperties()
    first.user_properties.append(StringPair("k", "v"))
    assert len(second.user_properties) == 0


def test_copy_is_independent():
    original = SubscriptionProperties(subscription_identifier=10)
    duplicate = copy.deepcopy(original)
    duplicate.subscription_identifier = 11
    assert original.subscription_identifier == 10
    assert duplicate == SubscriptionProperties(subscription_identifier=11)


def test_unsubscription_properties():
    properties = UnsubscriptionProperties()
    assert properties.user_properties == UserProperties()
    user = _two_user_properties()
    properties.user_properties = user
    assert properties.user_properties == user
    assert properties == UnsubscriptionProperties(user_properties=_two_user_properties())