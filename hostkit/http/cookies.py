"""Conversion between cookie header strings and dictionaries."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def obj_to_cookies(values: Mapping[str, Any]) -> str:
    """Joins ``key=value`` pairs with ``;``, skipping keys with falsy values."""

    return ";".join(f"{key}={value}" for key, value in values.items() if value)


def cookies_to_obj(cookies: Optional[str]) -> Optional[Dict[str, str]]:
    """Parses a ``Cookie`` header into a dict. Returns ``None`` for an empty string."""

    if not cookies:
        return None

    parsed: Dict[str, str] = {}
    for item in cookies.split(";"):
        if not item.strip():
            continue
        key, _, value = item.partition("=")
        parsed[key.strip()] = value.strip()
    return parsed
