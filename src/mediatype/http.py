"""Content-Type helpers for httpx requests and responses.

These helpers read and write the single ``Content-Type`` header of an
``httpx`` message as a :class:`~mediatype.media_type.MediaType`. Lists
of media ranges such as ``Accept`` headers are not handled here.
"""

import logging
from typing import Any, Mapping, Optional, Union

import httpx

from .config.settings import settings
from .exceptions import MediaTypeParseError
from .media_type import MediaType

logger = logging.getLogger(__name__)

CONTENT_TYPE = "Content-Type"

HeaderSource = Union[httpx.Request, httpx.Response, httpx.Headers, Mapping[str, str]]


def _headers_of(message: HeaderSource) -> Any:
    if isinstance(message, (httpx.Request, httpx.Response)):
        return message.headers
    if isinstance(message, httpx.Headers):
        return message
    return httpx.Headers(message)


def _as_media_type(value: Union[MediaType, str, None]) -> Optional[MediaType]:
    if value is None or isinstance(value, MediaType):
        return value
    return MediaType.parse(value)


def default_content_type() -> MediaType:
    """Get the configured default content type.

    :return: Media type from ``MEDIATYPE_DEFAULT_CONTENT_TYPE``
    :rtype: MediaType
    """
    return settings.default_media_type


def get_content_type(
    message: HeaderSource,
    default: Union[MediaType, str, None] = None,
    strict: Optional[bool] = None,
) -> Optional[MediaType]:
    """Get the Content-Type of an HTTP message as a media type.

    :param message: Request, response, headers or plain header mapping
    :type message: HeaderSource
    :param default: Value returned when the header is missing (or invalid
                    in non-strict mode)
    :type default: Union[MediaType, str, None]
    :param strict: Raise on an invalid header; defaults to the
                   ``strict_content_type`` setting
    :type strict: Optional[bool]
    :return: The parsed content type or ``default``
    :rtype: Optional[MediaType]
    :raises MediaTypeParseError: If the header is invalid in strict mode
    """
    fallback = _as_media_type(default)
    raw = _headers_of(message).get(CONTENT_TYPE)
    if raw is None or not raw.strip():
        return fallback

    try:
        return MediaType.parse(raw)
    except MediaTypeParseError as e:
        if settings.strict_content_type if strict is None else strict:
            raise
        logger.warning("Ignoring invalid Content-Type %r: %s", raw, e.reason)
        return fallback


def set_content_type(message: HeaderSource, media_type: Union[MediaType, str]) -> None:
    """Set the Content-Type header of an HTTP message.

    A string is parsed first, so invalid text fails before the message
    is modified.

    A plain header dict may spell the header in any case; existing
    spellings are replaced so only one Content-Type remains.

    :param message: Request, response, headers or mutable header mapping
    :type message: HeaderSource
    :param media_type: Content type to set
    :type media_type: Union[MediaType, str]
    :raises MediaTypeParseError: If ``media_type`` is an invalid string
    """
    value = str(_as_media_type(media_type))
    if isinstance(message, (httpx.Request, httpx.Response)):
        message.headers[CONTENT_TYPE] = value
    elif isinstance(message, httpx.Headers):
        message[CONTENT_TYPE] = value
    else:
        for key in [k for k in message if k.lower() == CONTENT_TYPE.lower()]:
            del message[key]
        message[CONTENT_TYPE] = value
    logger.debug("Set Content-Type to %s", value)


def has_content_type(message: HeaderSource, expected: Union[MediaType, str]) -> bool:
    """Check whether a message's Content-Type is compatible with a media type.

    Parameters such as ``charset`` are ignored. Messages without a valid
    Content-Type never match.

    :param message: Request, response, headers or plain header mapping
    :type message: HeaderSource
    :param expected: Media type to match, wildcards allowed
    :type expected: Union[MediaType, str]
    :return: True if the content type is compatible
    :rtype: bool
    """
    actual = get_content_type(message, strict=False)
    return _as_media_type(expected).is_compatible(actual)


__all__ = [
    "CONTENT_TYPE",
    "default_content_type",
    "get_content_type",
    "set_content_type",
    "has_content_type",
]
