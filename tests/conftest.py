from typing import Any

import pytest

from mcp_harness.protocol.base import Error
from mcp_harness.protocol.content import TextContent, TextResourceContents
from mcp_harness.protocol.initialization import (
    Implementation,
    InitializedNotification,
    InitializeResult,
    PromptsCapability,
    ResourcesCapability,
    ServerCapabilities,
    ToolsCapability,
)
from mcp_harness.protocol.jsonrpc import (
    JSONRPCError,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
)
from mcp_harness.protocol.prompts import (
    GetPromptRequest,
    GetPromptResult,
    ListPromptsResult,
    Prompt,
    PromptArgument,
    PromptMessage,
)
from mcp_harness.protocol.resources import (
    ListResourcesResult,
    ReadResourceRequest,
    ReadResourceResult,
    Resource,
)
from mcp_harness.protocol.tools import (
    CallToolRequest,
    CallToolResult,
    InputSchema,
    ListToolsResult,
    Tool,
)
from mcp_harness.shared.exceptions import MCPError

pytest_plugins = ["mcp_harness.testing.pytest_plugin"]

README_URI = "file:///docs/readme.md"


class CalculatorServer:
    """A small in-process server: two tools, one resource, one prompt."""

    def __init__(self):
        self.notifications: list[JSONRPCNotification] = []
        self.initialized: InitializedNotification | None = None
        self.requests: list[JSONRPCRequest] = []

    async def handle(self, request: JSONRPCRequest) -> Any:
        self.requests.append(request)
        handler = getattr(self, "_" + request.method.replace("/", "_"), None)
        if handler is None:
            return JSONRPCError.method_not_found(request.id, request.method)
        return JSONRPCResponse.from_result(handler(request), request.id)

    async def handle_notification(self, notification: JSONRPCNotification) -> None:
        if notification.method == "notifications/initialized":
            self.initialized = notification.to_notification(InitializedNotification)
        self.notifications.append(notification)

    def _initialize(self, request: JSONRPCRequest) -> InitializeResult:
        return InitializeResult(
            protocol_version="2025-03-26",
            capabilities=ServerCapabilities(
                tools=ToolsCapability(),
                resources=ResourcesCapability(),
                prompts=PromptsCapability(),
            ),
            server_info=Implementation(name="calculator", version="0.3.1"),
        )

    def _tools_list(self, request: JSONRPCRequest) -> ListToolsResult:
        schema = InputSchema(
            properties={"a": {"type": "number"}, "b": {"type": "number"}},
            required=["a", "b"],
        )
        return ListToolsResult(
            tools=[
                Tool(name="add", description="Add two numbers", input_schema=schema),
                Tool(name="divide", input_schema=schema),
            ]
        )

    def _tools_call(self, request: JSONRPCRequest) -> CallToolResult:
        call = request.to_request(CallToolRequest)
        args = call.arguments or {}
        if call.name == "add":
            return CallToolResult(content=[TextContent(text=str(args["a"] + args["b"]))])
        if call.name == "divide":
            if args["b"] == 0:
                return CallToolResult(
                    content=[TextContent(text="Division by zero")], is_error=True
                )
            return CallToolResult(content=[TextContent(text=str(args["a"] / args["b"]))])
        raise MCPError(Error.tool_not_found(call.name))

    def _resources_list(self, request: JSONRPCRequest) -> ListResourcesResult:
        return ListResourcesResult(
            resources=[Resource(uri=README_URI, name="readme", mime_type="text/markdown")]
        )

    def _resources_read(self, request: JSONRPCRequest) -> ReadResourceResult:
        read = request.to_request(ReadResourceRequest)
        if str(read.uri) != README_URI:
            raise MCPError(Error.resource_not_found(str(read.uri)))
        return ReadResourceResult(
            contents=[
                TextResourceContents(
                    uri=README_URI, mime_type="text/markdown", text="# Calculator"
                )
            ]
        )

    def _prompts_list(self, request: JSONRPCRequest) -> ListPromptsResult:
        return ListPromptsResult(
            prompts=[
                Prompt(
                    name="explain",
                    arguments=[PromptArgument(name="topic", required=True)],
                )
            ]
        )

    def _prompts_get(self, request: JSONRPCRequest) -> GetPromptResult:
        get = request.to_request(GetPromptRequest)
        topic = (get.arguments or {}).get("topic", "arithmetic")
        return GetPromptResult(
            description="Explain a topic",
            messages=[
                PromptMessage(role="user", content=TextContent(text=f"Explain {topic}"))
            ],
        )


@pytest.fixture
def calculator() -> CalculatorServer:
    return CalculatorServer()
