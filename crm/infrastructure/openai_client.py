"""Client for the OpenAI-compatible text generation API used by campaign builders."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

from openai import OpenAI, OpenAIError

from crm.config import Settings, get_settings
from crm.schemas import load_audience_rules_schema

logger = logging.getLogger(__name__)

_TRAILING_COMMA = re.compile(r"\s*[}\]]")

_RULES_SYSTEM_PROMPT = (
    "You are a helpful assistant that converts marketing descriptions into structured "
    "targeting rules in strict JSON format. Return only JSON and follow this format exactly:\n"
    '{\n  "rules": [\n    {\n      "field": "string",\n      "operator": "string",\n'
    '      "value": "any",\n      "logicGate": "AND/OR/NOT"\n    }\n  ]\n}'
)

_RULES_INSTRUCTION = (
    "Customers have the attributes name, email, phone, totalSpend (number), "
    "visitCount (number), lastOrderDate (date) and createdAt (date). "
    "Use only the operators =, !=, >, >=, <, <= and contains. "
    "Write dates as YYYY-MM-DD. 'logicGate' joins a rule to the previous rule and is "
    "evaluated strictly left to right; NOT negates only the rule it is attached to. "
    "The reply must match this JSON Schema: {schema}"
)

_MESSAGE_SYSTEM_PROMPT = (
    "You are a creative assistant that writes short, catchy marketing messages based on "
    "campaign names. Keep it under 20 words."
)


def _strip_code_fences(text: str) -> str:
    """Return JSON text without Markdown code fences."""

    s = text.strip()
    if not s.startswith("```"):
        return text

    cleaned = s.strip("`")
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1:
        return text
    return cleaned[start : end + 1]


def _remove_trailing_commas(text: str) -> str:
    """Remove trailing commas that break strict JSON decoding."""

    # Only drops a comma outside string literals when the next non-whitespace
    # character closes the object or array, e.g. "{ \"rules\": [], }".
    result: list[str] = []
    in_string = False
    escaped = False
    for position, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "," and _TRAILING_COMMA.match(text, position + 1):
            continue
        result.append(char)
    return "".join(result)


def _decode_json_reply(text: str) -> Any:
    json_text = text
    try:
        return json.loads(json_text)
    except json.JSONDecodeError:
        json_text = _strip_code_fences(json_text)
    try:
        return json.loads(json_text)
    except json.JSONDecodeError:
        json_text = _remove_trailing_commas(json_text)
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as exc:
        logger.error("Could not decode the generator reply: %s", json_text)
        raise GenerationError("The generator reply is not valid JSON.") from exc


class RuleGeneratorConfigurationError(RuntimeError):
    """Raised when the generator credentials are missing."""


class GenerationError(RuntimeError):
    """Raised when the generation API fails or replies with an unexpected shape."""


class AudienceRuleService:
    """Turn free-text audience descriptions into candidate rules.

    Each call makes a single request: the SDK's own retries are disabled and a
    failed request surfaces immediately as ``GenerationError``.
    """

    def __init__(self, settings: Settings | None = None, *, client: Any | None = None) -> None:
        settings = settings or get_settings()

        if client is None:
            api_key = settings.openai_api_key or ""
            if not api_key:
                raise RuleGeneratorConfigurationError(
                    "OPENAI_API_KEY is not defined in the environment.",
                )
            client_kwargs: dict[str, Any] = {
                "api_key": api_key,
                "timeout": settings.openai_timeout_seconds,
                "max_retries": 0,
            }
            if settings.openai_base_url:
                client_kwargs["base_url"] = settings.openai_base_url
            client = OpenAI(**client_kwargs)

        self._client = client
        self._model = settings.openai_model
        self._temperature = settings.openai_temperature
        self._json_mode = settings.openai_json_mode

    def generate_rule_candidates(self, description: str) -> list[Any]:
        """Return the raw ``rules`` list generated for ``description``.

        The entries are untrusted and must go through the rule validator.
        """

        if not isinstance(description, str) or not description.strip():
            raise GenerationError("An audience description is required to generate rules.")

        schema_text = json.dumps(load_audience_rules_schema(), ensure_ascii=False)
        messages = [
            {"role": "system", "content": _RULES_SYSTEM_PROMPT},
            {"role": "system", "content": _RULES_INSTRUCTION.format(schema=schema_text)},
            {
                "role": "user",
                "content": f'Generate targeting rules for this description:\n"{description.strip()}"',
            },
        ]

        text = self._complete(messages, json_reply=True)
        logger.debug("Raw generator reply for rules: %s", text)

        payload = _decode_json_reply(text)
        if not isinstance(payload, Mapping):
            raise GenerationError("The generator reply must be a JSON object.")
        rules = payload.get("rules")
        if not isinstance(rules, list):
            raise GenerationError("The generator reply does not contain a 'rules' list.")
        return rules

    def suggest_message(self, campaign_name: str) -> str:
        """Return a short marketing message for ``campaign_name``."""

        if not isinstance(campaign_name, str) or not campaign_name.strip():
            raise GenerationError("A campaign name is required to suggest a message.")

        messages = [
            {"role": "system", "content": _MESSAGE_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": f'Generate a campaign message for this campaign name: "{campaign_name.strip()}"',
            },
        ]
        text = self._complete(messages, json_reply=False).strip()
        logger.debug("Raw message suggestion: %s", text)
        if not text:
            raise GenerationError("The generator returned an empty message.")
        return text

    def _complete(self, messages: list[dict[str, str]], *, json_reply: bool) -> str:
        request_kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": messages,
            "temperature": self._temperature,
        }
        if json_reply and self._json_mode:
            request_kwargs["response_format"] = {"type": "json_object"}

        try:
            resp = self._client.chat.completions.create(**request_kwargs)
        except OpenAIError as exc:
            raise GenerationError("The request to the generation API failed.") from exc

        try:
            text = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise GenerationError("The generator reply does not contain usable text.") from exc
        if not isinstance(text, str) or not text.strip():
            raise GenerationError("The generator reply does not contain usable text.")
        return text


__all__ = [
    "AudienceRuleService",
    "GenerationError",
    "RuleGeneratorConfigurationError",
]
