"""Utility to extract JSON from LLM responses."""

from __future__ import annotations

import json


def extract_json(text: str) -> dict | list:
    """Extract JSON from an LLM response.

    Tries in order:
    1. Direct json.loads on the full text
    2. The body of a ```json fenced block
    3. The span between the outermost brackets, trying whichever of
       '{' or '[' appears first
    """
    text = (text or "").strip()

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    candidates = [_strip_code_fences(text), text]
    for candidate in candidates:
        for opener, closer in _bracket_order(candidate):
            parsed = _parse_span(candidate, opener, closer)
            if parsed is not None:
                return parsed

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    """Return the contents of the first fenced block, or the text unchanged."""
    start = text.find("```")
    if start == -1:
        return text
    body_start = text.find("\n", start)
    if body_start == -1:
        return text
    end = text.find("```", body_start)
    if end == -1:
        return text[body_start + 1 :].strip()
    return text[body_start + 1 : end].strip()


def _parse_span(text: str, opener: str, closer: str) -> dict | list | None:
    start = text.find(opener)
    end = text.rfind(closer)
    if start == -1 or end <= start:
        return None
    try:
        return json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return None


def _bracket_order(text: str) -> list[tuple[str, str]]:
    """Object and array bracket pairs, the one opening earliest first."""
    pairs = [("{", "}"), ("[", "]")]
    positions = {opener: text.find(opener) for opener, _ in pairs}
    return sorted(pairs, key=lambda p: positions[p[0]] if positions[p[0]] != -1 else len(text))
