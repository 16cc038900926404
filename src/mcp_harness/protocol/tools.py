"""
Tool discovery (`tools/list`) and execution (`tools/call`).

A tool failure can be reported two ways, and tests usually care which one
happened:

- the call succeeds at the protocol level and the result has `isError=True`
  (the tool ran and failed), or
- the response carries an error object (unknown tool, bad arguments).
"""

from typing import Any, Literal

from pydantic import Field

from .base import PaginatedRequest, PaginatedResult, ProtocolModel, Request, Result
from .content import AnyContent


class InputSchema(ProtocolModel):
    """JSON schema for a tool's arguments. Tools take named arguments only."""

    type: Literal["object"] = "object"
    properties: dict[str, Any] | None = None
    required: list[str] | None = None


class ToolAnnotations(ProtocolModel):
    title: str | None = None
    read_only_hint: bool | None = Field(default=None, alias="readOnlyHint")
    destructive_hint: bool | None = Field(default=None, alias="destructiveHint")
    idempotent_hint: bool | None = Field(default=None, alias="idempotentHint")
    open_world_hint: bool | None = Field(default=None, alias="openWorldHint")


class Tool(ProtocolModel):
    name: str
    description: str | None = None
    input_schema: InputSchema = Field(default_factory=InputSchema, alias="inputSchema")
    annotations: ToolAnnotations | None = None


class ListToolsRequest(PaginatedRequest):
    method: Literal["tools/list"] = "tools/list"


class ListToolsResult(PaginatedResult):
    tools: list[Tool]


class CallToolRequest(Request):
    method: Literal["tools/call"] = "tools/call"
    name: str
    arguments: dict[str, Any] | None = None


class CallToolResult(Result):
    content: list[AnyContent]
    is_error: bool = Field(default=False, alias="isError")
    """
    True when the tool ran and failed. Protocol failures use an error response
    instead.
    """

    structured_content: dict[str, Any] | None = Field(
        default=None, alias="structuredContent"
    )
