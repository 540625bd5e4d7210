"""HTTP field-value validation shared by all headers."""

from __future__ import annotations

import re

from csp_header.exceptions import InvalidArgumentError

# Characters forbidden in a field value:
# C0 controls except HTAB (\x00-\x08, \x0a-\x1f), DEL (\x7f),
# C1 controls (\x80-\x9f), Unicode line/paragraph separators (\u2028-\u2029).
FORBIDDEN_CHARS_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f-\x9f\u2028\u2029]")


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def filter_value(value: object) -> str:
    """Strip all forbidden characters from a header value."""
    return FORBIDDEN_CHARS_RE.sub("", _as_text(value))


def is_valid(value: object) -> bool:
    """Return True if the value is safe to emit as (part of) a header value."""
    return FORBIDDEN_CHARS_RE.search(_as_text(value)) is None


def assert_valid(value: object) -> None:
    """Raise InvalidArgumentError if the value fails is_valid()."""
    if not is_valid(value):
        raise InvalidArgumentError("Invalid header value")
