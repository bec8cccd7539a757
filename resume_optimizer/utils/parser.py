"""
Lenient parsers for model output.

Handles the shapes a keyword answer comes back in:
- Comma separated list (what the prompt asks for)
- JSON array, bare or in ``` blocks
- Bulleted or numbered lines
"""

import json
import re

_BULLET = re.compile(r"^\s*(?:[-*•]+|\d+[.)])\s*")
_LABEL = re.compile(r"^\s*(?:top\s+\d+\s+)?keywords?\s*(?:and\s+skills?)?\s*:\s*", re.IGNORECASE)


def extract_json_array(text: str) -> list | None:
    """
    Extract a JSON array from model output.

    Args:
        text: Raw model response text

    Returns:
        Parsed list, or None if no array could be decoded
    """
    if not text or not text.strip():
        return None

    for strategy in (_try_clean_json, _try_fenced, _try_find_array_bounds):
        result = strategy(text)
        if isinstance(result, list):
            return result
    return None


def _try_clean_json(text: str) -> list | dict | None:
    """Try parsing the entire text as JSON."""
    try:
        return json.loads(text.strip())
    except json.JSONDecodeError:
        return None


def _try_fenced(text: str) -> list | dict | None:
    """Extract JSON from ``` ... ``` blocks (any language or none)."""
    for match in re.findall(r"```(?:\w*)\s*([\s\S]*?)\s*```", text):
        try:
            return json.loads(match.strip())
        except json.JSONDecodeError:
            continue
    return None


def _try_find_array_bounds(text: str) -> list | None:
    """Find a JSON array by matching brackets."""
    start = text.find("[")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escape_next = False

    for i, char in enumerate(text[start:], start):
        if escape_next:
            escape_next = False
            continue
        if char == "\\" and in_string:
            escape_next = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue

        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                try:
                    return json.loads(text[start:i + 1])
                except json.JSONDecodeError:
                    return None
    return None


def parse_keywords(text: str, limit: int) -> list[str]:
    """
    Parse a keyword list out of model output.

    Best effort: never raises, returns an empty list when nothing usable
    is found. Duplicates are dropped case-insensitively, order is kept.

    Args:
        text: Raw model response text
        limit: Maximum number of keywords to keep

    Returns:
        Ordered list of keywords
    """
    array = extract_json_array(text)
    if array is not None:
        candidates = [str(item) for item in array if isinstance(item, (str, int, float))]
    else:
        body = _LABEL.sub("", (text or "").strip())
        candidates = re.split(r"[,\n]", body)

    keywords: list[str] = []
    seen: set[str] = set()
    for candidate in candidates:
        keyword = _BULLET.sub("", candidate).strip().strip("\"'`*").rstrip(".").strip()
        if not keyword or keyword.lower() in seen:
            continue
        seen.add(keyword.lower())
        keywords.append(keyword)

    return keywords[:limit]
