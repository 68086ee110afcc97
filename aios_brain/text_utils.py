"""
Thought parsing helpers.

Thoughts are opaque text; the only structure recognised is a single
`key = value` assertion.
"""

from typing import Optional, Tuple

ASSERTION_SEPARATOR = "="


def clean_text(text: str) -> str:
    """Strip surrounding whitespace."""
    return text.strip()


def extract_assertion(thought: str) -> Optional[Tuple[str, str]]:
    """
    Split a thought of the form ``key = value`` into a (key, value) pair.

    Exactly one separator is required. Both sides are trimmed and may end up
    empty. Returns None for any other shape.
    """
    parts = thought.split(ASSERTION_SEPARATOR)
    if len(parts) != 2:
        return None
    key, value = parts
    return clean_text(key), clean_text(value)
