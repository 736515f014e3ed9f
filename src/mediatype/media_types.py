"""Well-known media type constants.

Each constant is a pre-parsed :class:`~mediatype.media_type.MediaType`
in canonical form, so it can be compared with parsed header values
directly::

    if media_types.JSON.is_compatible(parse_media_type(header)):
        ...
"""

from typing import Dict, Optional

from .media_type import MediaType

ALL = MediaType.parse("*/*")
OCTET_STREAM = MediaType.parse("application/octet-stream")
XML = MediaType.parse("application/xml")
HTML = MediaType.parse("text/html")
TXT = MediaType.parse("text/plain")
TXT_UTF8 = MediaType.parse("text/plain;charset=utf-8")
JSON = MediaType.parse("application/json")
PDF = MediaType.parse("application/pdf")
PS = MediaType.parse("application/postscript")
PNG = MediaType.parse("image/png")
JPEG = MediaType.parse("image/jpeg")
GIF = MediaType.parse("image/gif")
TIFF = MediaType.parse("image/tiff")
BMP = MediaType.parse("image/bmp")

WELL_KNOWN: Dict[str, MediaType] = {
    "ALL": ALL,
    "OCTET_STREAM": OCTET_STREAM,
    "XML": XML,
    "HTML": HTML,
    "TXT": TXT,
    "TXT_UTF8": TXT_UTF8,
    "JSON": JSON,
    "PDF": PDF,
    "PS": PS,
    "PNG": PNG,
    "JPEG": JPEG,
    "GIF": GIF,
    "TIFF": TIFF,
    "BMP": BMP,
}


def lookup(name: str) -> Optional[MediaType]:
    """Get a well-known media type by constant name, ignoring case.

    :param name: Constant name, e.g. ``"json"`` or ``"TXT_UTF8"``
    :type name: str
    :return: The media type or None if the name is unknown
    :rtype: Optional[MediaType]
    """
    return WELL_KNOWN.get((name or "").strip().upper())


__all__ = [
    "ALL",
    "OCTET_STREAM",
    "XML",
    "HTML",
    "TXT",
    "TXT_UTF8",
    "JSON",
    "PDF",
    "PS",
    "PNG",
    "JPEG",
    "GIF",
    "TIFF",
    "BMP",
    "WELL_KNOWN",
    "lookup",
]
