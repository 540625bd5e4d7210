"""Exceptions raised by the header classes."""

from __future__ import annotations


class HeaderError(Exception):
    """Base class for all csp_header errors."""


class InvalidArgumentError(HeaderError, ValueError):
    """An argument (directive name, source token, header line) was rejected."""


class HeaderRuntimeError(HeaderError, RuntimeError):
    """A header operation was given objects it cannot combine."""
