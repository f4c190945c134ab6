from __future__ import annotations

import re

# One level of nested braces. Braces inside quoted strings are not understood.
JSON_OBJECT_RE = re.compile(r"\{(?:[^{}]|\{[^{}]*\})*\}")


def extract_json(content: str) -> str:
    """Return the first brace-balanced {...} substring in content, or ''."""
    match = JSON_OBJECT_RE.search(content or "")
    return match.group(0) if match else ""
