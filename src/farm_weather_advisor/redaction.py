"""Redaction of weather API credentials in logs and journal payloads.

WeatherAPI.com (and OpenWeather-style APIs) take the credential as a query
parameter, so request URLs echoed back in error bodies are the main leak path.
"""

from __future__ import annotations

import re
from typing import Any

REDACTED = "[REDACTED]"

# Dict keys whose values are always replaced wholesale.
_SENSITIVE_KEY_RE = re.compile(
    r"^(key|appid)$|authorization|token|secret|password|api[_-]?key",
    re.IGNORECASE,
)

_TEXT_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # ...current.json?key=abc&q=... / &appid=abc / &api_key=abc
    (re.compile(r"(?i)([?&](?:key|appid|api_key)=)[^&\s\"']+"), r"\1" + REDACTED),
    (re.compile(r"(?i)\b(bearer)\s+[A-Za-z0-9\-._~+/]+=*"), r"\1 " + REDACTED),
    # WEATHER_API_KEY=abc, token: abc
    (
        re.compile(
            r"(?i)\b(authorization|token|secret|password|weather[_-]?api[_-]?key|api[_-]?key)"
            r"\s*[:=]\s*[^\s,;]+"
        ),
        r"\1=" + REDACTED,
    ),
)


def sanitize_text(text: str) -> str:
    """Redact credentials embedded in free text such as URLs or error bodies."""
    for pattern, replacement in _TEXT_RULES:
        text = pattern.sub(replacement, text)
    return text


def sanitize_for_logging(value: Any) -> Any:
    """Recursively redact sensitive keys and credential-bearing strings."""
    if isinstance(value, dict):
        return {
            key: REDACTED if _SENSITIVE_KEY_RE.search(str(key)) else sanitize_for_logging(child)
            for key, child in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(sanitize_for_logging(item) for item in value)
    if isinstance(value, str):
        return sanitize_text(value)
    return value
