"""Media type value object and parser.

This module provides :class:`MediaType`, an immutable representation of
an RFC 2045 / HTTP media type such as ``text/plain;charset=utf-8``, along
with a strict parser from the header form and a deterministic renderer
back to text.

Type and subtype are compared case-insensitively but stored as given;
they are lowercased only when rendered. Parameter names are
case-insensitive and keep their first-seen casing, parameter values are
case-sensitive.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .exceptions import (
    MediaTypeArgumentError,
    MediaTypeParseError,
    ParameterFormatError,
)
from .parameters import CaseInsensitiveOrderedDict

logger = logging.getLogger(__name__)

WILDCARD = "*"

_TOKEN_DELIMITERS = frozenset("()<>@,;:\\'/[]?=")
_CHARS_NEEDING_QUOTES = frozenset('()<>@,;:\\"/[]?= \t\r\n')

_EMPTY_PARAMETERS = CaseInsensitiveOrderedDict()
_EMPTY_PARAMETERS_VIEW = MappingProxyType(_EMPTY_PARAMETERS)


def _new_parameter_map(
    parameters: Optional[Mapping[str, str]],
) -> CaseInsensitiveOrderedDict:
    if not parameters:
        return _EMPTY_PARAMETERS
    return CaseInsensitiveOrderedDict(parameters)


def _needs_quotes(value: str) -> bool:
    return any(c in _CHARS_NEEDING_QUOTES for c in value)


def _is_token(text: str) -> bool:
    if not text:
        return False
    for c in text:
        if c in _TOKEN_DELIMITERS or not 32 < ord(c) < 127:
            return False
    return True


def _parse_error(reason: str, text: Optional[str]) -> MediaTypeParseError:
    logger.debug("Rejected media type %r: %s", text, reason)
    return MediaTypeParseError(reason, media_type=text)


class MediaType:
    """Immutable media type made of type, subtype and parameters.

    ``None`` for ``type`` or ``subtype`` means the wildcard ``*``. A
    wildcard type is only legal together with a wildcard subtype, i.e.
    ``*/*``; ``*/json`` raises :class:`MediaTypeArgumentError`.

    The ``parameters`` mapping is copied, so later changes to it do not
    affect the instance. Methods that "change" a media type return a new
    instance.

    :param type: Primary type, e.g. ``text``
    :type type: Optional[str]
    :param subtype: Subtype, e.g. ``plain``
    :type subtype: Optional[str]
    :param parameters: Optional parameter mapping, e.g. ``{"charset": "utf-8"}``
    :type parameters: Optional[Mapping[str, str]]
    :raises MediaTypeArgumentError: If the type is a wildcard but the
        subtype is not
    """

    __slots__ = ("_type", "_subtype", "_parameters")

    def __init__(
        self,
        type: Optional[str] = None,
        subtype: Optional[str] = None,
        parameters: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._init(type, subtype, _new_parameter_map(parameters))

    def _init(
        self,
        type: Optional[str],
        subtype: Optional[str],
        parameters: CaseInsensitiveOrderedDict,
    ) -> None:
        self._type = WILDCARD if type is None else type
        self._subtype = WILDCARD if subtype is None else subtype
        if self._type == WILDCARD and self._subtype != WILDCARD:
            raise MediaTypeArgumentError(
                "Media type wildcard type is legal only in '*/*' (all media types)",
                argument="subtype",
            )
        self._parameters = parameters

    @classmethod
    def _create(
        cls,
        type: Optional[str],
        subtype: Optional[str],
        parameters: CaseInsensitiveOrderedDict,
    ) -> "MediaType":
        # Takes ownership of ``parameters``; callers hand over a fresh map.
        instance = cls.__new__(cls)
        instance._init(type, subtype, parameters or _EMPTY_PARAMETERS)
        return instance

    @classmethod
    def parse(cls, text: str) -> "MediaType":
        """Parse a single media type expression.

        Accepts ``type/subtype`` followed by any number of
        ``;name=value`` parameters. Values may be quoted with ``"``, in
        which case they may contain ``;`` and ``=``; no backslash escapes
        are processed. The legacy spelling ``*`` is read as ``*/*``.

        :param text: Media type string, e.g. ``text/html; charset=UTF-8``
        :type text: str
        :return: The parsed media type
        :rtype: MediaType
        :raises MediaTypeParseError: If the text is not a valid media type
        """
        if not isinstance(text, str) or not text:
            raise _parse_error("Media type must not be empty", text)

        semicolon_idx = text.find(";")
        if semicolon_idx >= 0:
            full_type = text[:semicolon_idx].strip()
        else:
            full_type = text.strip()
        if not full_type:
            raise _parse_error("Media type must not be empty", text)

        # HttpURLConnection style "Accept: *; q=.2"
        if full_type == WILDCARD:
            full_type = "*/*"

        slash_idx = full_type.find("/")
        if slash_idx == -1:
            raise _parse_error(f"Media type does not contain '/': {text!r}", text)
        if slash_idx == len(full_type) - 1:
            raise _parse_error(
                f"Media type does not contain subtype after '/': {text!r}", text
            )

        type_ = full_type[:slash_idx]
        subtype = full_type[slash_idx + 1 :]
        if not _is_token(type_):
            raise _parse_error(f"Invalid type in media type: {text!r}", text)
        if not _is_token(subtype):
            raise _parse_error(f"Invalid subtype in media type: {text!r}", text)
        if type_ == WILDCARD and subtype != WILDCARD:
            raise _parse_error(
                "Media type wildcard type is legal only in '*/*' (all media types)",
                text,
            )

        parameters = _parse_parameters(text, semicolon_idx)
        return cls._create(type_, subtype, parameters)

    @property
    def type(self) -> str:
        """Primary type as given, e.g. ``Text`` for ``Text/Plain``."""
        return self._type

    @property
    def subtype(self) -> str:
        """Subtype as given, e.g. ``Plain`` for ``Text/Plain``."""
        return self._subtype

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of the parameters. Keys are case-insensitive."""
        if self._parameters is _EMPTY_PARAMETERS:
            return _EMPTY_PARAMETERS_VIEW
        return MappingProxyType(self._parameters)

    @property
    def is_wildcard_type(self) -> bool:
        """Whether the primary type is ``*``."""
        return self._type == WILDCARD

    @property
    def is_wildcard_subtype(self) -> bool:
        """Whether the subtype is ``*``.

        Always true when :attr:`is_wildcard_type` is.
        """
        return self._subtype == WILDCARD

    @property
    def full_type(self) -> str:
        """Canonical ``type/subtype`` string without parameters."""
        return self._render(with_parameters=False)

    def without_parameters(self) -> "MediaType":
        """Return a media type with the same type and subtype but no parameters.

        :return: Media type without parameters (``self`` if it has none)
        :rtype: MediaType
        """
        if not self._parameters:
            return self
        return MediaType(self._type, self._subtype)

    def without_named_parameters(self, *names: str) -> "MediaType":
        """Return a media type with the given parameters removed.

        Names are matched case-insensitively; names that are not present
        are ignored.

        :param names: One or more parameter names to remove
        :type names: str
        :return: Media type without the named parameters
        :rtype: MediaType
        :raises MediaTypeArgumentError: If no name is given
        """
        if not names:
            raise MediaTypeArgumentError(
                "At least one parameter name is required; "
                "use without_parameters() to remove all parameters",
                argument="names",
            )
        if not self._parameters:
            return self
        remaining = self._parameters.copy()
        for name in names:
            remaining.pop(name, None)
        return MediaType._create(self._type, self._subtype, remaining)

    def with_parameter(self, name: str, value: str) -> "MediaType":
        """Return a media type with one parameter added or replaced.

        An existing parameter of the same name (ignoring case) keeps its
        position and its original name casing; only the value changes.

        :param name: Parameter name
        :type name: str
        :param value: Parameter value
        :type value: str
        :return: Media type with the parameter set
        :rtype: MediaType
        """
        return self.with_parameters({name: value})

    def with_parameters(
        self, parameters: Optional[Mapping[str, str]]
    ) -> "MediaType":
        """Return a media type with several parameters added or replaced.

        :param parameters: Parameters to merge into the current ones
        :type parameters: Optional[Mapping[str, str]]
        :return: Media type with the merged parameters (``self`` if
                 ``parameters`` is empty)
        :rtype: MediaType
        """
        if not parameters:
            return self
        if not self._parameters:
            return MediaType(self._type, self._subtype, parameters)
        merged = self._parameters.copy()
        merged.update(parameters)
        return MediaType._create(self._type, self._subtype, merged)

    def get_parameter(self, name: str) -> Optional[str]:
        """Get a parameter value, treating an empty value as absent.

        :param name: Parameter name (case-insensitive)
        :type name: str
        :return: The value or None
        :rtype: Optional[str]
        """
        value = self._parameters.get(name)
        if not value:
            return None
        return value

    def get_int_parameter(self, name: str) -> Optional[int]:
        """Get a parameter value as an integer.

        :param name: Parameter name (case-insensitive)
        :type name: str
        :return: The integer value or None if absent or empty
        :rtype: Optional[int]
        :raises ParameterFormatError: If the value is not a base-10 integer
        """
        value = self.get_parameter(name)
        if value is None:
            return None
        digits = value[1:] if value[:1] in ("+", "-") else value
        if not (digits.isascii() and digits.isdigit()):
            raise ParameterFormatError(
                f"Parameter {name!r} is not an integer: {value!r}",
                name=name,
                value=value,
                expected="integer",
            )
        return int(value)

    def get_bool_parameter(
        self, name: str, default: Optional[bool] = None
    ) -> Optional[bool]:
        """Get a parameter value as a boolean.

        Accepts ``true`` and ``false`` in any casing.

        :param name: Parameter name (case-insensitive)
        :type name: str
        :param default: Value returned when the parameter is absent or empty
        :type default: Optional[bool]
        :return: The boolean value or ``default``
        :rtype: Optional[bool]
        :raises ParameterFormatError: If the value is neither true nor false
        """
        value = self.get_parameter(name)
        if value is None:
            return default
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ParameterFormatError(
            f"Parameter {name!r} is not a boolean: {value!r}",
            name=name,
            value=value,
            expected="boolean",
        )

    def is_compatible(self, other: Optional["MediaType"]) -> bool:
        """Check whether this media type is compatible with another one.

        ``image/*`` is compatible with ``image/png``, ``*/*`` with
        everything. Parameters are ignored. The relation is symmetric.

        :param other: Media type to compare with
        :type other: Optional[MediaType]
        :return: True if the media types are compatible
        :rtype: bool
        """
        if other is None:
            return False
        if self.is_wildcard_type or other.is_wildcard_type:
            return True
        if self._type.lower() != other._type.lower():
            return False
        return (
            self.is_wildcard_subtype
            or other.is_wildcard_subtype
            or self._subtype.lower() == other._subtype.lower()
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return (
            self._type.lower() == other._type.lower()
            and self._subtype.lower() == other._subtype.lower()
            and self._parameters == other._parameters
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._type.lower() + self._subtype.lower(),
                frozenset(self._parameters.lower_items()),
            )
        )

    def __str__(self) -> str:
        """Render the canonical ``type/subtype;name=value`` form.

        Type and subtype are lowercased, parameter names keep their
        casing. Values containing separators or whitespace are quoted.

        Not every instance survives a round trip through :meth:`parse`:
        a parameter with an empty value is rendered as a bare name
        (``x/y;a``), which does not parse, and a value containing ``"``
        is quoted without escaping, which ends the quoted value early.
        """
        return self._render(with_parameters=True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    def _render(self, with_parameters: bool) -> str:
        parts = [self._type.lower(), "/", self._subtype.lower()]
        if with_parameters:
            for name, value in self._parameters.items():
                parts.append(";")
                parts.append(name)
                if not value:
                    continue
                parts.append("=")
                if _needs_quotes(value):
                    parts.append(f'"{value}"')
                else:
                    parts.append(value)
        return "".join(parts)


def _parse_parameters(text: str, start_idx: int) -> CaseInsensitiveOrderedDict:
    parameters = CaseInsensitiveOrderedDict()
    idx = start_idx
    while 0 <= idx < len(text):
        if text[idx] != ";":
            raise _parse_error(
                f"Unexpected character after quoted value in media type parameters: {text!r}",
                text,
            )

        eq_idx = text.find("=", idx + 1)
        if eq_idx == -1:
            raise _parse_error(
                f"Missing '=' in media type parameters: {text!r}", text
            )

        name = text[idx + 1 : eq_idx].strip()
        if not name:
            raise _parse_error(
                f"Missing name in media type parameters: {text!r}", text
            )

        value_idx = eq_idx + 1
        if value_idx >= len(text):
            raise _parse_error(
                f"Missing value in media type parameters: {text!r}", text
            )

        if text[value_idx] == '"':
            quote_end_idx = text.find('"', value_idx + 1)
            if quote_end_idx == -1:
                raise _parse_error(
                    f"Illegal value quotation in media type parameters: {text!r}",
                    text,
                )
            value = text[value_idx + 1 : quote_end_idx]
            idx = quote_end_idx + 1
            while idx < len(text) and text[idx] == " ":
                idx += 1
        else:
            end_idx = text.find(";", value_idx)
            if end_idx == -1:
                value = text[value_idx:]
            else:
                value = text[value_idx:end_idx]
            idx = end_idx

        parameters[name] = value
    return parameters


def parse_media_type(text: str) -> MediaType:
    """Parse a media type string.

    Shortcut for :meth:`MediaType.parse`.

    :param text: Media type string
    :type text: str
    :return: The parsed media type
    :rtype: MediaType
    :raises MediaTypeParseError: If the text is not a valid media type
    """
    return MediaType.parse(text)


__all__ = [
    "WILDCARD",
    "MediaType",
    "parse_media_type",
]
