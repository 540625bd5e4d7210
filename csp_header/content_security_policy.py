"""Content-Security-Policy (CSP 1.0) header.

See https://www.w3.org/TR/CSP1/ for the directive set and the parsing rules.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from csp_header import header_value
from csp_header.exceptions import HeaderRuntimeError, InvalidArgumentError
from csp_header.generic_header import split_header_line
from csp_header.header import Header, MultipleHeader

logger = structlog.get_logger()

FIELD_NAME = "Content-Security-Policy"

NONE_SOURCE = "'none'"

# CSP 1.0 section 4 directives
VALID_DIRECTIVE_NAMES = frozenset({
    "default-src",
    "script-src",
    "object-src",
    "style-src",
    "img-src",
    "media-src",
    "frame-src",
    "font-src",
    "connect-src",
    "sandbox",
    "report-uri",
})


class ContentSecurityPolicy(MultipleHeader):
    """A policy made of named directives, each holding a source list.

    Directives are rendered in the order they were first set. Setting a
    directive again replaces its whole source list.
    """

    def __init__(self) -> None:
        self._directives: dict[str, str] = {}

    @staticmethod
    def valid_directive_names() -> frozenset[str]:
        return VALID_DIRECTIVE_NAMES

    def get_directives(self) -> dict[str, str]:
        """Return a snapshot of ``{directive: value-text}`` in insertion order."""
        return dict(self._directives)

    def set_directive(self, name: str, sources: Iterable[str]) -> ContentSecurityPolicy:
        """Set a directive to the given source list.

        An empty source list stores ``'none'``, except for ``report-uri``,
        which is removed instead. A single empty-string source stores an empty
        value, rendered as the bare directive name. Raises InvalidArgumentError for an unknown
        directive name or a source token containing forbidden characters.
        """
        if name not in VALID_DIRECTIVE_NAMES:
            raise InvalidArgumentError(
                f"{type(self).__name__}.set_directive expects a valid directive name; received {name!r}"
            )
        if isinstance(sources, str):
            raise InvalidArgumentError(f"Sources for {name} must be a list of strings, not a string")
        sources = list(sources)
        if not sources:
            if name == "report-uri":
                if self._directives.pop(name, None) is not None:
                    logger.debug("csp_report_uri_removed")
                return self
            self._directives[name] = NONE_SOURCE
            return self

        for source in sources:
            if not isinstance(source, str):
                raise InvalidArgumentError(
                    f"Sources for {name} must be strings; received {type(source).__name__}"
                )
            header_value.assert_valid(source)

        self._directives[name] = " ".join(sources)
        return self

    @classmethod
    def from_string(cls, header_line: str) -> ContentSecurityPolicy:
        """Parse a ``Content-Security-Policy: ...`` line.

        The text after a directive name is kept as a single source token, and
        only the first occurrence of each directive is used.
        """
        header = cls()
        name, value = split_header_line(header_line)
        if name.lower() != FIELD_NAME.lower():
            raise InvalidArgumentError(f'Invalid header line for {FIELD_NAME} string: "{name}"')

        for token in value.split(";"):
            token = token.strip()
            if not token:
                continue
            directive_name, _, remainder = token.partition(" ")
            if directive_name in header._directives:
                logger.debug("csp_duplicate_directive_ignored", directive=directive_name)
                continue
            # A bare directive name (e.g. "sandbox") is stored with an empty value
            header.set_directive(directive_name, [remainder])
        return header

    def get_field_name(self) -> str:
        return FIELD_NAME

    def get_field_value(self) -> str:
        return " ".join(
            f"{name} {value};" if value else f"{name};"
            for name, value in self._directives.items()
        )

    def to_string_multiple_headers(self, headers: Sequence[Header]) -> str:
        lines = [self.to_string()]
        for header in headers:
            if not isinstance(header, ContentSecurityPolicy):
                raise HeaderRuntimeError(
                    "The ContentSecurityPolicy multiple header implementation can only"
                    " accept a list of ContentSecurityPolicy headers"
                )
            lines.append(header.to_string())
        return "\r\n".join(lines) + "\r\n"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentSecurityPolicy):
            return NotImplemented
        return list(self._directives.items()) == list(other._directives.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<ContentSecurityPolicy {self.get_field_value()!r}>"
