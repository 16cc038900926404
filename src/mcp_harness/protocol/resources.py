from typing import Literal

from pydantic import Field

from .base import PaginatedRequest, PaginatedResult, ProtocolModel, Request, Result
from .content import (
    Annotations,
    BlobResourceContents,
    ResourceUri,
    TextResourceContents,
)


class Resource(ProtocolModel):
    """
    A resource the server can read, as advertised by `resources/list`.
    """

    uri: ResourceUri
    name: str
    description: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")
    annotations: Annotations | None = None
    size: int | None = None


class ListResourcesRequest(PaginatedRequest):
    method: Literal["resources/list"] = "resources/list"


class ListResourcesResult(PaginatedResult):
    resources: list[Resource]


class ReadResourceRequest(Request):
    method: Literal["resources/read"] = "resources/read"
    uri: ResourceUri


class ReadResourceResult(Result):
    """
    Contents of a read resource. One URI can yield several entries, e.g. a
    directory listing.
    """

    contents: list[TextResourceContents | BlobResourceContents]
