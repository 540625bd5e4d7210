"""
csp-header - Content-Security-Policy header model, parser and serializer
"""

__version__ = "0.1.0"

from csp_header.content_security_policy import VALID_DIRECTIVE_NAMES, ContentSecurityPolicy
from csp_header.exceptions import HeaderError, HeaderRuntimeError, InvalidArgumentError
from csp_header.generic_header import GenericHeader, split_header_line
from csp_header.header import Header, MultipleHeader

__all__ = [
    'ContentSecurityPolicy',
    'GenericHeader',
    'Header',
    'HeaderError',
    'HeaderRuntimeError',
    'InvalidArgumentError',
    'MultipleHeader',
    'VALID_DIRECTIVE_NAMES',
    'split_header_line',
]
