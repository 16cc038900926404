from mcp_harness.testing import builders
from mcp_harness.testing.assertions import (
    assert_error_code,
    assert_error_message_contains,
    assert_error_response,
    assert_prompt_valid,
    assert_resource_valid,
    assert_response_contains,
    assert_response_error,
    assert_response_success,
    assert_success_response,
    assert_tool_content_contains,
    assert_tool_error,
    assert_tool_success,
)
from mcp_harness.testing.builders import (
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
from mcp_harness.testing.harness import SessionState, TestHarness
from mcp_harness.testing.mock_client import MockClient
from mcp_harness.testing.mock_server import MockServer

__all__ = [
    "MockClient",
    "MockServer",
    "TestHarness",
    "SessionState",
    "builders",
    # builders
    "mock_request",
    "mock_request_with_params",
    "mock_tool_call",
    "mock_resource_read",
    "mock_prompt_get",
    "mock_initialize",
    "mock_notification",
    "mock_success",
    "mock_error",
    # assertions
    "assert_tool_success",
    "assert_tool_error",
    "assert_tool_content_contains",
    "assert_resource_valid",
    "assert_prompt_valid",
    "assert_response_success",
    "assert_response_error",
    "assert_error_code",
    "assert_error_message_contains",
    "assert_response_contains",
    "assert_success_response",
    "assert_error_response",
]
