"""
JSON-RPC 2.0 envelopes.

Four closed message kinds travel between peers:

- `JSONRPCRequest`: `{id, method, params?}`, answered by exactly one response.
- `JSONRPCNotification`: `{method, params?}`, never answered.
- `JSONRPCResponse`: `{id, result}`.
- `JSONRPCError`: `{id, error}`.

A response is the union of the last two, so a constructed response always
carries a result or an error and never both. Wire dictionaries are checked by
`parse_message`.
"""

from collections.abc import Mapping
from typing import Any, Self, TypeVar

from pydantic import Field, JsonValue, ValidationError
from pydantic_core import PydanticSerializationError

from mcp_harness.protocol.base import (
    Error,
    Notification,
    ProtocolModel,
    Request,
    RequestId,
    Result,
)
from mcp_harness.shared.exceptions import ConstructionError, ProtocolError

JSONRPC_VERSION = "2.0"

Params = dict[str, JsonValue] | list[JsonValue]

RequestT = TypeVar("RequestT", bound=Request)
NotificationT = TypeVar("NotificationT", bound=Notification)
ResultT = TypeVar("ResultT", bound=Result)


class JSONRPCRequest(ProtocolModel):
    """
    A request envelope.

    `id=None` marks a request whose id has not been assigned yet; `MockClient`
    replaces it before the request goes anywhere. Constructing a request with
    params that are not JSON values fails immediately.
    """

    jsonrpc: str = Field(default=JSONRPC_VERSION, frozen=True)
    id: RequestId | None
    method: str = Field(min_length=1)
    params: Params | None = None

    @classmethod
    def build(cls, id: RequestId | None, method: str, params: Any = None) -> Self:
        """Like the constructor, but failures raise `ConstructionError`."""
        try:
            return cls(id=id, method=method, params=params)
        except ValidationError as e:
            raise ConstructionError(
                f"Failed to build '{method}' request: {e}"
            ) from e

    @classmethod
    def from_request(cls, request: Request, id: RequestId | None) -> Self:
        """Wrap a typed request in an envelope."""
        try:
            protocol_data = request.to_protocol()
        except PydanticSerializationError as e:
            raise ConstructionError(
                f"Failed to serialize {type(request).__name__}: {e}"
            ) from e
        return cls.build(id, protocol_data["method"], protocol_data.get("params"))

    def to_request(self, request_type: type[RequestT]) -> RequestT:
        """Decode the params into a typed request."""
        return request_type.from_protocol(self.to_wire())

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {
            "jsonrpc": self.jsonrpc,
            "id": self.id,
            "method": self.method,
        }
        if self.params is not None:
            wire["params"] = self.params
        return wire


class JSONRPCNotification(ProtocolModel):
    jsonrpc: str = Field(default=JSONRPC_VERSION, frozen=True)
    method: str = Field(min_length=1)
    params: Params | None = None

    @classmethod
    def build(cls, method: str, params: Any = None) -> Self:
        try:
            return cls(method=method, params=params)
        except ValidationError as e:
            raise ConstructionError(
                f"Failed to build '{method}' notification: {e}"
            ) from e

    @classmethod
    def from_notification(cls, notification: Notification) -> Self:
        try:
            protocol_data = notification.to_protocol()
        except PydanticSerializationError as e:
            raise ConstructionError(
                f"Failed to serialize {type(notification).__name__}: {e}"
            ) from e
        return cls.build(protocol_data["method"], protocol_data.get("params"))

    def to_notification(self, notification_type: type[NotificationT]) -> NotificationT:
        return notification_type.from_protocol(self.to_wire())

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        if self.params is not None:
            wire["params"] = self.params
        return wire


class JSONRPCResponse(ProtocolModel):
    """A successful response."""

    jsonrpc: str = Field(default=JSONRPC_VERSION, frozen=True)
    id: RequestId
    result: dict[str, JsonValue]

    @classmethod
    def from_result(cls, result: Result | Mapping[str, Any], id: RequestId) -> Self:
        try:
            payload = result.to_protocol() if isinstance(result, Result) else dict(result)
            return cls(id=id, result=payload)
        except (ValidationError, PydanticSerializationError) as e:
            raise ConstructionError(f"Failed to build response {id!r}: {e}") from e

    def to_result(self, result_type: type[ResultT]) -> ResultT:
        """
        Decode the result into `result_type`.

        Raises:
            ProtocolError: If the payload does not match the expected type.
        """
        try:
            return result_type.from_protocol(self.result)
        except (ValidationError, ValueError, TypeError) as e:
            raise ProtocolError(
                f"Failed to parse {result_type.__name__} from response {self.id!r}: {e}"
            ) from e

    def to_wire(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id, "result": self.result}


class JSONRPCError(ProtocolModel):
    """
    A failed response. `id` is None only when the request id could not be
    read, e.g. on a parse error.
    """

    jsonrpc: str = Field(default=JSONRPC_VERSION, frozen=True)
    id: RequestId | None
    error: Error

    @classmethod
    def from_error(cls, error: Error, id: RequestId | None) -> Self:
        return cls(id=id, error=error)

    @classmethod
    def build(
        cls, id: RequestId | None, code: int, message: str, data: Any = None
    ) -> Self:
        """Build from error parts. Non-JSON `data` raises `ConstructionError`."""
        try:
            return cls(id=id, error=Error(code=code, message=message, data=data))
        except ValidationError as e:
            raise ConstructionError(f"Failed to build error {code} {id!r}: {e}") from e

    @classmethod
    def method_not_found(cls, id: RequestId | None, method: str) -> Self:
        return cls(id=id, error=Error.method_not_found(method))

    @classmethod
    def invalid_params(cls, id: RequestId | None, message: str) -> Self:
        return cls(id=id, error=Error.invalid_params(message))

    @classmethod
    def internal_error(cls, id: RequestId | None, message: str, data: Any = None) -> Self:
        return cls(id=id, error=Error.internal_error(message, data=data))

    @classmethod
    def parse_error(cls, message: str = "Parse error") -> Self:
        return cls(id=None, error=Error.parse_error(message))

    @classmethod
    def tool_not_found(cls, id: RequestId | None, name: str) -> Self:
        return cls(id=id, error=Error.tool_not_found(name))

    @classmethod
    def resource_not_found(cls, id: RequestId | None, uri: str) -> Self:
        return cls(id=id, error=Error.resource_not_found(uri))

    def to_wire(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id, "error": self.error.to_protocol()}


JSONRPCResponseOrError = JSONRPCResponse | JSONRPCError

JSONRPCMessage = JSONRPCRequest | JSONRPCNotification | JSONRPCResponse | JSONRPCError


def parse_message(payload: Mapping[str, Any]) -> JSONRPCMessage:
    """
    Classify and validate a wire dictionary.

    Raises:
        ProtocolError: If the payload is not a well-formed JSON-RPC 2.0 message,
            including a response with neither or both of `result` and `error`.
    """
    if not isinstance(payload, Mapping):
        raise ProtocolError(f"Expected a JSON object, got {type(payload).__name__}")

    version = payload.get("jsonrpc", JSONRPC_VERSION)
    if version != JSONRPC_VERSION:
        raise ProtocolError(f"Unsupported JSON-RPC version: {version!r}")

    try:
        if "method" in payload:
            if "id" in payload:
                return JSONRPCRequest.model_validate(payload)
            return JSONRPCNotification.model_validate(payload)

        has_result = "result" in payload
        has_error = "error" in payload
        if has_result and has_error:
            raise ProtocolError(
                f"Response {payload.get('id')!r} carries both result and error"
            )
        if has_error:
            return JSONRPCError(
                id=payload.get("id"), error=Error.from_protocol(payload["error"])
            )
        if has_result:
            return JSONRPCResponse.model_validate(payload)
    except (ValidationError, KeyError, TypeError) as e:
        raise ProtocolError(f"Malformed message {dict(payload)!r}: {e}") from e

    if "id" in payload:
        raise ProtocolError(
            f"Response {payload['id']!r} carries neither result nor error"
        )
    raise ProtocolError(f"Unrecognized message: {dict(payload)!r}")
