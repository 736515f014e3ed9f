"""Media type parsing and comparison.

This package models RFC 2045 / HTTP media types (``text/plain;charset=utf-8``)
as immutable, comparable values with a strict parser and a canonical
string form. It includes well-known constants, typed parameter access
and helpers for the Content-Type header of httpx messages.

:var __version__: Current package version
:type __version__: str
"""

from .exceptions import (
    MediaTypeArgumentError,
    MediaTypeError,
    MediaTypeParseError,
    ParameterFormatError,
)
from .media_type import WILDCARD, MediaType, parse_media_type
from .parameters import CaseInsensitiveOrderedDict

__version__ = "0.1.0"

__all__ = [
    "WILDCARD",
    "MediaType",
    "parse_media_type",
    "CaseInsensitiveOrderedDict",
    "MediaTypeError",
    "MediaTypeParseError",
    "MediaTypeArgumentError",
    "ParameterFormatError",
]
