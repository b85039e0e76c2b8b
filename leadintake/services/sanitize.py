"""HTML escaping for user-supplied text interpolated into notification emails."""
from __future__ import annotations

from typing import Dict, Optional

_ESCAPES = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
})


def sanitize_input(value: Optional[str]) -> str:
    if not value:
        return ""
    return value.translate(_ESCAPES)


def sanitize_fields(fields: Dict[str, Optional[str]]) -> Dict[str, str]:
    return {key: sanitize_input(value) for key, value in fields.items()}
