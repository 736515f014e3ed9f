"""Pydantic models describing media types.

Used to expose a parsed media type as structured data, e.g. as JSON
output of the ``mediatype parse --json`` command.
"""

from typing import Dict

from pydantic import BaseModel, Field

from .media_type import MediaType


class MediaTypeInfo(BaseModel):
    """Structured description of a media type.

    :param media_type: Canonical string form including parameters
    :type media_type: str
    :param type: Primary type as given
    :type type: str
    :param subtype: Subtype as given
    :type subtype: str
    :param full_type: Canonical ``type/subtype`` without parameters
    :type full_type: str
    :param parameters: Parameters with their original name casing, in order
    :type parameters: Dict[str, str]
    :param wildcard_type: Whether the primary type is ``*``
    :type wildcard_type: bool
    :param wildcard_subtype: Whether the subtype is ``*``
    :type wildcard_subtype: bool
    """

    media_type: str = Field(..., description="Canonical media type string")
    type: str = Field(..., description="Primary type")
    subtype: str = Field(..., description="Subtype")
    full_type: str = Field(..., description="Canonical type/subtype")
    parameters: Dict[str, str] = Field(
        default_factory=dict, description="Media type parameters"
    )
    wildcard_type: bool = Field(False, description="Primary type is a wildcard")
    wildcard_subtype: bool = Field(False, description="Subtype is a wildcard")

    @classmethod
    def from_media_type(cls, media_type: MediaType) -> "MediaTypeInfo":
        """Build the description of a media type.

        :param media_type: Media type to describe
        :type media_type: MediaType
        :return: Description model
        :rtype: MediaTypeInfo
        """
        return cls(
            media_type=str(media_type),
            type=media_type.type,
            subtype=media_type.subtype,
            full_type=media_type.full_type,
            parameters=dict(media_type.parameters.items()),
            wildcard_type=media_type.is_wildcard_type,
            wildcard_subtype=media_type.is_wildcard_subtype,
        )
