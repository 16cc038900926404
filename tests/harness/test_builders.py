import pytest

from mcp_harness.protocol.base import PROTOCOL_VERSION
from mcp_harness.protocol.initialization import ClientCapabilities, RootsCapability
from mcp_harness.protocol.jsonrpc import JSONRPCError, JSONRPCResponse
from mcp_harness.protocol.tools import CallToolResult
from mcp_harness.shared.exceptions import ConstructionError
from mcp_harness.testing.builders import (
    PLACEHOLDER_ID,
    is_placeholder_id,
    mock_error,
    mock_initialize,
    mock_notification,
    mock_prompt_get,
    mock_request,
    mock_request_with_params,
    mock_resource_read,
    mock_success,
    mock_tool_call,
)
from mcp_harness.testing.mock_client import MockClient


def test_mock_request():
    request = mock_request("tools/list")
    assert request.id == PLACEHOLDER_ID
    assert request.method == "tools/list"
    assert request.params is None


def test_mock_request_with_params():
    request = mock_request_with_params("custom/method", [1, "two"])
    assert request.params == [1, "two"]


def test_typed_builders_use_wire_names():
    assert mock_tool_call("add", {"a": 1}).params == {"name": "add", "arguments": {"a": 1}}
    assert mock_resource_read("file:///a.txt").params == {"uri": "file:///a.txt"}
    assert mock_prompt_get("explain", {"topic": "x"}).params == {
        "name": "explain",
        "arguments": {"topic": "x"},
    }


def test_prompt_arguments_must_be_strings():
    with pytest.raises(ConstructionError, match="GetPromptRequest"):
        mock_prompt_get("explain", {"count": ["not", "a", "string"]})


def test_mock_initialize():
    request = mock_initialize(
        "tests", "0.1", capabilities=ClientCapabilities(roots=RootsCapability(list_changed=True))
    )
    assert request.method == "initialize"
    assert request.params == {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"roots": {"listChanged": True}},
        "clientInfo": {"name": "tests", "version": "0.1"},
    }


def test_mock_notification():
    notification = mock_notification("notifications/progress", {"progress": 1})
    assert notification.to_wire() == {
        "jsonrpc": "2.0",
        "method": "notifications/progress",
        "params": {"progress": 1},
    }


def test_mock_success_and_error():
    success = mock_success({"ok": True}, request_id=4)
    error = mock_error(-32000, "custom", data=[1, 2])

    assert isinstance(success, JSONRPCResponse)
    assert success.to_wire() == {"jsonrpc": "2.0", "id": 4, "result": {"ok": True}}
    assert isinstance(error, JSONRPCError)
    assert error.id == PLACEHOLDER_ID
    assert error.error.data == [1, 2]


def test_builder_ids_are_placeholders():
    for request in (
        mock_request("x"),
        mock_tool_call("t"),
        mock_resource_read("file:///r"),
        mock_prompt_get("p"),
        mock_initialize(),
        MockClient.create_list_resources_request(),
        MockClient.create_list_prompts_request(),
    ):
        assert is_placeholder_id(request.id), request.id

    assert is_placeholder_id(None)
    assert not is_placeholder_id(1)
    assert not is_placeholder_id("req-1")


@pytest.mark.parametrize(
    "uri",
    ["https://example.com", "HTTP://Example.com/a/../b", "file:///tmp/a b.txt", "notes"],
)
def test_resource_read_keeps_uri_verbatim(uri):
    assert mock_resource_read(uri).params == {"uri": uri}
    assert MockClient.create_resource_read_request(uri).params == {"uri": uri}


def test_mock_error_with_non_json_data():
    with pytest.raises(ConstructionError, match="Failed to build error -1"):
        mock_error(-1, "x", data={1, 2})


def test_mock_success_with_unserializable_result():
    result = CallToolResult(content=[], structured_content={"x": object()})
    with pytest.raises(ConstructionError, match="Failed to build response"):
        mock_success(result)
