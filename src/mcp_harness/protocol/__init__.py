from mcp_harness.protocol.base import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    PROTOCOL_VERSION,
    RESOURCE_NOT_FOUND,
    TOOL_NOT_FOUND,
    VALIDATION_ERROR,
    EmptyResult,
    Error,
    Notification,
    PaginatedRequest,
    PaginatedResult,
    ProtocolModel,
    Request,
    RequestId,
    Result,
)
from mcp_harness.protocol.content import (
    Annotations,
    AudioContent,
    BlobResourceContents,
    EmbeddedResource,
    ImageContent,
    TextContent,
    TextResourceContents,
)
from mcp_harness.protocol.initialization import (
    ClientCapabilities,
    Implementation,
    InitializedNotification,
    InitializeRequest,
    InitializeResult,
    PromptsCapability,
    ResourcesCapability,
    ServerCapabilities,
    ToolsCapability,
)
from mcp_harness.protocol.jsonrpc import (
    JSONRPC_VERSION,
    JSONRPCError,
    JSONRPCMessage,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    JSONRPCResponseOrError,
    parse_message,
)
from mcp_harness.protocol.prompts import (
    GetPromptRequest,
    GetPromptResult,
    ListPromptsRequest,
    ListPromptsResult,
    Prompt,
    PromptArgument,
    PromptMessage,
)
from mcp_harness.protocol.resources import (
    ListResourcesRequest,
    ListResourcesResult,
    ReadResourceRequest,
    ReadResourceResult,
    Resource,
)
from mcp_harness.protocol.tools import (
    CallToolRequest,
    CallToolResult,
    InputSchema,
    ListToolsRequest,
    ListToolsResult,
    Tool,
    ToolAnnotations,
)

__all__ = [
    # base
    "PROTOCOL_VERSION",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "VALIDATION_ERROR",
    "RESOURCE_NOT_FOUND",
    "TOOL_NOT_FOUND",
    "ProtocolModel",
    "Request",
    "PaginatedRequest",
    "Notification",
    "Result",
    "EmptyResult",
    "PaginatedResult",
    "Error",
    "RequestId",
    # content
    "Annotations",
    "TextContent",
    "ImageContent",
    "AudioContent",
    "EmbeddedResource",
    "TextResourceContents",
    "BlobResourceContents",
    # initialization
    "Implementation",
    "ClientCapabilities",
    "ServerCapabilities",
    "PromptsCapability",
    "ResourcesCapability",
    "ToolsCapability",
    "InitializeRequest",
    "InitializedNotification",
    "InitializeResult",
    # jsonrpc
    "JSONRPC_VERSION",
    "JSONRPCRequest",
    "JSONRPCNotification",
    "JSONRPCResponse",
    "JSONRPCError",
    "JSONRPCResponseOrError",
    "JSONRPCMessage",
    "parse_message",
    # prompts
    "Prompt",
    "PromptArgument",
    "PromptMessage",
    "ListPromptsRequest",
    "ListPromptsResult",
    "GetPromptRequest",
    "GetPromptResult",
    # resources
    "Resource",
    "ListResourcesRequest",
    "ListResourcesResult",
    "ReadResourceRequest",
    "ReadResourceResult",
    # tools
    "Tool",
    "InputSchema",
    "ToolAnnotations",
    "ListToolsRequest",
    "ListToolsResult",
    "CallToolRequest",
    "CallToolResult",
]
