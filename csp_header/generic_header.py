"""Generic ``Name: value`` header handling."""

from __future__ import annotations

import re

from csp_header import header_value
from csp_header.exceptions import InvalidArgumentError
from csp_header.header import Header

# RFC 7230 token: 1*tchar
_FIELD_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9a-zA-Z]+")


def is_valid_field_name(name: str) -> bool:
    """Return True if the name is a non-empty RFC 7230 token."""
    return bool(name) and _FIELD_NAME_RE.fullmatch(name) is not None


def split_header_line(header_line: str) -> tuple[str, str]:
    """Split a raw header line into ``(name, value)``.

    The value has its leading whitespace removed. Raises InvalidArgumentError
    when there is no colon or the value contains forbidden characters.
    """
    name, sep, value = header_line.partition(":")
    if not sep:
        raise InvalidArgumentError('Header must match with the format "name:value"')
    if not header_value.is_valid(value):
        raise InvalidArgumentError("Invalid header value detected")
    return name, value.lstrip()


class GenericHeader(Header):
    """Any header without a dedicated class."""

    def __init__(self, field_name: str, field_value: str = "") -> None:
        self.set_field_name(field_name)
        self.set_field_value(field_value)

    @classmethod
    def from_string(cls, header_line: str) -> GenericHeader:
        name, value = split_header_line(header_line)
        return cls(name, value)

    def set_field_name(self, field_name: str) -> GenericHeader:
        if not isinstance(field_name, str) or not is_valid_field_name(field_name):
            raise InvalidArgumentError(
                f"Header name must be a valid RFC 7230 (section 3.2) field-name; received {field_name!r}"
            )
        self._field_name = field_name
        return self

    def set_field_value(self, field_value: str) -> GenericHeader:
        header_value.assert_valid(field_value)
        self._field_value = "" if field_value is None else str(field_value)
        return self

    def get_field_name(self) -> str:
        return self._field_name

    def get_field_value(self) -> str:
        return self._field_value

    def __repr__(self) -> str:
        return f"GenericHeader({self._field_name!r}, {self._field_value!r})"
