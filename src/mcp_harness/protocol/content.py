from typing import Annotated, Literal

from pydantic import Field, field_validator

from .base import ProtocolModel

Role = Literal["user", "assistant"]
# Carried verbatim, never normalized.
ResourceUri = str


class Annotations(ProtocolModel):
    """Client rendering hints attached to content."""

    audience: list[Role] | None = None
    priority: float | None = Field(default=None, ge=0, le=1)

    @field_validator("audience", mode="before")
    @classmethod
    def wrap_single_role(cls, v):
        if isinstance(v, str):
            return [v]
        return v


class ResourceContents(ProtocolModel):
    uri: ResourceUri
    mime_type: str | None = Field(default=None, alias="mimeType")


class TextResourceContents(ResourceContents):
    text: str


class BlobResourceContents(ResourceContents):
    blob: str
    """
    Base64-encoded bytes.
    """


class TextContent(ProtocolModel):
    type: Literal["text"] = "text"
    text: str
    annotations: Annotations | None = None


class ImageContent(ProtocolModel):
    """Base64-encoded image data."""

    type: Literal["image"] = "image"
    mime_type: str = Field(alias="mimeType")
    data: str
    annotations: Annotations | None = None


class AudioContent(ProtocolModel):
    """Base64-encoded audio data."""

    type: Literal["audio"] = "audio"
    mime_type: str = Field(alias="mimeType")
    data: str
    annotations: Annotations | None = None


class EmbeddedResource(ProtocolModel):
    """A resource inlined into a tool result or prompt message."""

    type: Literal["resource"] = "resource"
    resource: TextResourceContents | BlobResourceContents
    annotations: Annotations | None = None


AnyContent = Annotated[
    TextContent | ImageContent | AudioContent | EmbeddedResource,
    Field(discriminator="type"),
]
