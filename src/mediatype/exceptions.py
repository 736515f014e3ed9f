"""Structured exception classes for media type handling."""

import json
from typing import Any, Dict, Optional


class MediaTypeError(Exception):
    """Base exception for media type parsing and handling errors.

    Catch this to handle malformed media type text, bad constructor
    or builder arguments, and parameter values that fail typed
    conversion in one place. ``to_dict`` and ``to_json`` give a
    structured form for logs and API error bodies.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class MediaTypeParseError(MediaTypeError, ValueError):
    """Raised when a media type string cannot be parsed.

    This exception is raised for every grammar violation found while
    parsing untrusted text: empty input, a missing '/', invalid token
    characters, malformed parameters, unterminated quotes and an illegal
    wildcard combination.

    :param message: Description of the grammar violation
    :param media_type: Optional raw input that failed to parse
    """

    def __init__(self, message: str, media_type: Optional[str] = None):
        """Initialize parse error with message and the offending input."""
        details = {}
        if media_type is not None:
            details["media_type"] = media_type
        super().__init__(message=message, code="MEDIA_TYPE_PARSE_ERROR", details=details)
        self.media_type = media_type

    @property
    def reason(self) -> str:
        """Human-readable reason of the failure."""
        return self.message


class MediaTypeArgumentError(MediaTypeError, ValueError):
    """Raised when the media type API is called with invalid arguments.

    Unlike :class:`MediaTypeParseError` this signals a programming error,
    e.g. constructing ``*/json`` directly or removing parameters without
    naming any.

    :param message: Description of the misuse
    :param argument: Optional name of the offending argument
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        """Initialize argument error with message and optional argument name."""
        details = {}
        if argument:
            details["argument"] = argument
        super().__init__(
            message=message, code="MEDIA_TYPE_ARGUMENT_ERROR", details=details
        )


class ParameterFormatError(MediaTypeError, ValueError):
    """Raised when a parameter value cannot be converted to a typed value.

    :param message: Description of the conversion failure
    :param name: Name of the parameter
    :param value: Raw parameter value
    :param expected: Name of the expected type (e.g. "integer")
    """

    def __init__(self, message: str, name: str, value: str, expected: str):
        """Initialize parameter format error with the conversion context."""
        details = {"parameter": name, "value": value, "expected": expected}
        super().__init__(message=message, code="PARAMETER_FORMAT_ERROR", details=details)
        self.name = name
        self.value = value
        self.expected = expected
