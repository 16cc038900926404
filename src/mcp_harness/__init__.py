"""Mock client, mock server and end-to-end harness for testing MCP peers."""

from mcp_harness.config import HarnessSettings
from mcp_harness.shared.exceptions import (
    ConstructionError,
    ExpectationError,
    HarnessError,
    MCPError,
    NotInitializedError,
    ProtocolError,
    TransportError,
)
from mcp_harness.shared.handler import RequestHandler
from mcp_harness.testing import MockClient, MockServer, TestHarness
from mcp_harness.transport.base import Transport, TransportMessage
from mcp_harness.transport.memory import MemoryTransport

__all__ = [
    "HarnessSettings",
    "RequestHandler",
    "MockClient",
    "MockServer",
    "TestHarness",
    "Transport",
    "TransportMessage",
    "MemoryTransport",
    "HarnessError",
    "ConstructionError",
    "TransportError",
    "ProtocolError",
    "MCPError",
    "ExpectationError",
    "NotInitializedError",
]
