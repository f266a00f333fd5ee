"""Response rendering - remote payloads to caller-facing text. Never raises."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from manifoldmcp.models.params import ToolParams

Renderer = Callable[[ToolParams, httpx.Response], str]


def _payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def pretty_json(params: ToolParams, response: httpx.Response) -> str:
    """Remote JSON body, indented. Falls back to the raw text for non-JSON bodies."""
    payload = _payload(response)
    if payload is None:
        return response.text
    return json.dumps(payload, indent=2, ensure_ascii=False)


def confirmation(message: str) -> Renderer:
    """Fixed sentence, ignoring the response body."""

    def render(params: ToolParams, response: httpx.Response) -> str:
        return message

    return render


def choose(attribute: str, when_true: str, when_false: str) -> Renderer:
    """One of two sentences depending on a boolean argument of the call."""

    def render(params: ToolParams, response: httpx.Response) -> str:
        return when_true if getattr(params, attribute, None) else when_false

    return render


def field_sentence(template: str, field: str) -> Renderer:
    """Template filled with one field of the JSON payload (empty when missing)."""

    def render(params: ToolParams, response: httpx.Response) -> str:
        payload = _payload(response)
        value = payload.get(field) if isinstance(payload, dict) else None
        return template.format("" if value is None else value)

    return render
