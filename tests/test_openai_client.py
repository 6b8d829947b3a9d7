"""Tests for the OpenAI-compatible rule generator adapter."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from openai import OpenAIError

from crm.application.use_cases.campaigns import suggest_campaign_message
from crm.application.use_cases.rules import MalformedRuleError, generate_rule_set
from crm.config import Settings
from crm.domain.entities import LogicGate
from crm.infrastructure import openai_client
from crm.infrastructure.openai_client import (
    AudienceRuleService,
    GenerationError,
    RuleGeneratorConfigurationError,
)


class _FakeCompletions:
    def __init__(self, replies):
        self._replies = list(replies)
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=reply))])


def _service(*replies, **settings_overrides):
    completions = _FakeCompletions(replies)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    settings = Settings(_env_file=None, openai_api_key="test-key", **settings_overrides)
    return AudienceRuleService(settings, client=client), completions


def test_rules_are_decoded_from_plain_json() -> None:
    service, completions = _service(
        '{"rules": [{"field": "totalSpend", "operator": ">", "value": "1000"}]}'
    )

    rules = service.generate_rule_candidates("people who spent over 1000")

    assert rules == [{"field": "totalSpend", "operator": ">", "value": "1000"}]
    request = completions.calls[0]
    assert request["response_format"] == {"type": "json_object"}
    assert request["model"] == "llama-3.1-8b-instant"
    assert "people who spent over 1000" in request["messages"][-1]["content"]


def test_json_mode_can_be_disabled() -> None:
    service, completions = _service('{"rules": []}', openai_json_mode=False)

    service.generate_rule_candidates("everyone")

    assert "response_format" not in completions.calls[0]


def test_code_fenced_reply_is_unwrapped() -> None:
    service, _ = _service(
        '```json\n{"rules": [{"field": "visitCount", "operator": "<", "value": "3"}]}\n```'
    )

    assert service.generate_rule_candidates("rare visitors") == [
        {"field": "visitCount", "operator": "<", "value": "3"}
    ]


def test_trailing_commas_are_tolerated() -> None:
    service, _ = _service('{"rules": [{"field": "name", "operator": "=", "value": "Ana",},],}')

    assert service.generate_rule_candidates("customers named Ana") == [
        {"field": "name", "operator": "=", "value": "Ana"}
    ]


def test_trailing_comma_removal_leaves_string_values_alone() -> None:
    service, _ = _service(
        '{"rules": [{"field": "note", "operator": "contains", "value": "a, ]"},'
        '{"field": "tag", "operator": "=", "value": "say \\"x, }\\""},]}'
    )

    assert service.generate_rule_candidates("notes") == [
        {"field": "note", "operator": "contains", "value": "a, ]"},
        {"field": "tag", "operator": "=", "value": 'say "x, }"'},
    ]


@pytest.mark.parametrize(
    "reply",
    [
        "Sure! Here are your rules.",
        "[1, 2, 3]",
        '{"filters": []}',
        '{"rules": "totalSpend > 1000"}',
        "   ",
    ],
)
def test_unusable_replies_raise_generation_error(reply: str) -> None:
    service, _ = _service(reply)

    with pytest.raises(GenerationError):
        service.generate_rule_candidates("big spenders")


def test_transport_failure_is_not_retried() -> None:
    service, completions = _service(OpenAIError("boom"), '{"rules": []}')

    with pytest.raises(GenerationError):
        service.generate_rule_candidates("big spenders")

    assert len(completions.calls) == 1


def test_blank_description_is_rejected_without_a_request() -> None:
    service, completions = _service('{"rules": []}')

    with pytest.raises(GenerationError):
        service.generate_rule_candidates("   ")

    assert completions.calls == []


def test_missing_api_key_is_a_configuration_error() -> None:
    settings = Settings(_env_file=None, openai_api_key="  ")

    with pytest.raises(RuleGeneratorConfigurationError):
        AudienceRuleService(settings)


def test_sdk_client_is_built_without_retries(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict = {}

    def fake_openai(**kwargs):
        captured.update(kwargs)
        return SimpleNamespace()

    monkeypatch.setattr(openai_client, "OpenAI", fake_openai)
    settings = Settings(
        _env_file=None,
        openai_api_key="secret",
        openai_base_url="https://example.test/v1",
        openai_timeout_seconds=12.5,
    )

    AudienceRuleService(settings)

    assert captured == {
        "api_key": "secret",
        "timeout": 12.5,
        "max_retries": 0,
        "base_url": "https://example.test/v1",
    }


def test_generated_rules_are_validated_into_a_rule_set() -> None:
    service, _ = _service(
        '{"rules": ['
        '{"field": "totalSpend", "operator": ">", "value": 1000},'
        '{"field": "lastOrderDate", "operator": ">", "value": "2025-01-01", "logicGate": "AND"}'
        "]}"
    )

    rule_set = generate_rule_set("high value recent customers", generator=service)

    assert [rule.value for rule in rule_set] == ["1000", "2025-01-01"]
    assert rule_set[1].logic_gate is LogicGate.AND


def test_malformed_generated_rules_are_rejected_as_a_batch() -> None:
    service, _ = _service(
        '{"rules": ['
        '{"field": "totalSpend", "operator": ">", "value": "1000"},'
        '{"field": "visitCount", "value": "3"}'
        "]}"
    )

    with pytest.raises(MalformedRuleError) as exc_info:
        generate_rule_set("anything", generator=service)

    assert exc_info.value.index == 1


def test_generation_error_propagates_through_use_case() -> None:
    service, _ = _service("not json at all")

    with pytest.raises(GenerationError):
        generate_rule_set("anything", generator=service)


def test_message_suggestion_is_plain_text() -> None:
    service, completions = _service("  Treat yourself this spring!  ")

    message = suggest_campaign_message(" Spring Sale ", suggester=service)

    assert message == "Treat yourself this spring!"
    assert "response_format" not in completions.calls[0]
    assert '"Spring Sale"' in completions.calls[0]["messages"][-1]["content"]


def test_message_suggestion_requires_a_campaign_name() -> None:
    service, completions = _service("unused")

    with pytest.raises(ValueError):
        suggest_campaign_message("", suggester=service)

    assert completions.calls == []
