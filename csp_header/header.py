"""Abstract header interfaces."""

from __future__ import annotations

import abc
from collections.abc import Sequence


class Header(abc.ABC):
    """A single HTTP header field."""

    @abc.abstractmethod
    def get_field_name(self) -> str:
        ...

    @abc.abstractmethod
    def get_field_value(self) -> str:
        ...

    def to_string(self) -> str:
        """Render the header as a ``Name: value`` line (without CRLF)."""
        return f"{self.get_field_name()}: {self.get_field_value()}"

    def __str__(self) -> str:
        return self.to_string()


class MultipleHeader(Header):
    """A header that may appear on several lines of the same message."""

    @abc.abstractmethod
    def to_string_multiple_headers(self, headers: Sequence[Header]) -> str:
        """Render this header and its same-named siblings, one CRLF-terminated line each."""
        ...
