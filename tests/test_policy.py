import pytest

from feedprocessor.config import settings
from feedprocessor.domain.message_types import MessageType, StatusMessageType
from feedprocessor.domain.policy import MessageTypePolicy, default_policy


def test_policy_from_names_normalizes_case_and_blanks():
    policy = MessageTypePolicy.from_names([" msg", "air", ""], ["pl"])

    assert policy.message_types == {MessageType.MSG, MessageType.AIR}
    assert policy.is_expected_status_message_type(StatusMessageType.PL)
    assert not policy.is_expected_status_message_type(StatusMessageType.OK)


def test_policy_rejects_unknown_names():
    with pytest.raises(ValueError):
        MessageTypePolicy.from_names(["MSG", "XYZ"], [])


def test_policy_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "expected_message_types", "MSG,CLK")
    monkeypatch.setattr(settings, "expected_status_types", "SL")

    policy = MessageTypePolicy.from_settings()

    assert policy.is_expected_message_type(MessageType.CLK)
    assert not policy.is_expected_message_type(MessageType.STA)
    assert policy.status_message_types == {StatusMessageType.SL}


def test_default_policy_excludes_ui_events():
    policy = default_policy()

    assert policy is default_policy()
    assert not policy.is_expected_message_type(MessageType.SEL)
    assert not policy.is_expected_message_type(MessageType.CLK)
    assert all(policy.is_expected_status_message_type(s) for s in StatusMessageType)


def test_message_type_token_counts():
    assert MessageType.MSG.token_count == 22
    assert MessageType.AIR.token_count == 10
    assert MessageType.STA.token_count == 11
