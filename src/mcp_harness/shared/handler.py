"""The contract a system under test must satisfy to be driven by TestHarness."""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from mcp_harness.protocol.jsonrpc import (
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponseOrError,
)

T = TypeVar("T")

HandlerReply = JSONRPCResponseOrError | dict[str, Any]

DefaultHandler = Callable[
    [JSONRPCRequest], JSONRPCResponseOrError | Awaitable[JSONRPCResponseOrError]
]


@runtime_checkable
class RequestHandler(Protocol):
    """
    Anything that answers requests and absorbs notifications.

    Both methods may be plain or async. `handle` may also return the response
    as a wire dictionary, or raise `MCPError` to report a failure.
    """

    def handle(
        self, request: JSONRPCRequest
    ) -> HandlerReply | Awaitable[HandlerReply]: ...

    def handle_notification(
        self, notification: JSONRPCNotification
    ) -> None | Awaitable[None]: ...


async def resolve(value: T | Awaitable[T]) -> T:
    """Await `value` if a sync-or-async callable handed back an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value
