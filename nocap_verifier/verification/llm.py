"""Prompt builders and response parsing for LLM-backed agents."""

from __future__ import annotations

import json
from typing import Any, Dict, Sequence

from .errors import ProviderResponseUnparseable

ANTHROPIC_VERSION = "2023-06-01"


def build_fact_check_prompt(statement: str) -> str:
    # Wording and categories are what the live providers are tuned against
    return (
        "You are a fact-checking expert. Analyze this statement and determine if it is factually TRUE or FALSE. "
        "If you cannot determine with confidence, respond INCONCLUSIVE.\n"
        "\n"
        f'Statement: "{statement}"\n'
        "\n"
        "Respond in JSON format:\n"
        "{\n"
        '  "verdict": "true" | "false" | "inconclusive",\n'
        '  "confidence": 0.0-1.0,\n'
        '  "reasoning": "brief explanation"\n'
        "}"
    )


def build_correction_prompt(false_statement: str, reasonings: Sequence[str]) -> str:
    numbered = "\n".join(f"{i + 1}. {reasoning}" for i, reasoning in enumerate(reasonings))
    return (
        f'This false statement was made: "{false_statement}"\n'
        "\n"
        "Multiple fact-checkers provided these explanations:\n"
        f"{numbered}\n"
        "\n"
        "Provide a clear, concise correction (2-3 sentences max) that states the accurate information."
    )


def parse_verdict_payload(raw_response: str) -> Dict[str, Any]:
    """Parse the JSON verdict object embedded in an LLM text response.

    Expected format:
        {"verdict": "false", "confidence": 0.9, "reasoning": "..."}

    Raises:
        ProviderResponseUnparseable: no JSON object with a ``verdict`` key
    """

    data = (raw_response or "").strip()
    if data.startswith("```"):
        data = data.strip("`").strip()
        if data.lower().startswith("json"):
            data = data[4:].strip()

    try:
        payload = json.loads(data)
    except json.JSONDecodeError:
        start = data.find("{")
        end = data.rfind("}")
        if start == -1 or end <= start:
            raise ProviderResponseUnparseable("LLM response is not valid JSON")
        try:
            payload = json.loads(data[start : end + 1])
        except json.JSONDecodeError as exc:
            raise ProviderResponseUnparseable("LLM response is not valid JSON") from exc

    if not isinstance(payload, dict) or "verdict" not in payload:
        raise ProviderResponseUnparseable("LLM response must be an object with a verdict")
    return payload


def _require_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ProviderResponseUnparseable(message)
    return value


def extract_claude_text(data: Dict[str, Any]) -> str:
    """Return ``content[0].text`` from a Messages API response."""
    try:
        text = data["content"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ProviderResponseUnparseable("Claude response has no text content") from exc
    return _require_text(text, "Claude response has no text content")


def extract_gemini_text(data: Dict[str, Any]) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a generateContent response."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ProviderResponseUnparseable("Gemini response has no text candidate") from exc
    return _require_text(text, "Gemini response has no text candidate")
