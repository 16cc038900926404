import traceback
from typing import Any, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

PROTOCOL_VERSION = "2025-03-26"

RequestId = int | str
Cursor = str

RequestT = TypeVar("RequestT", bound="Request")
NotificationT = TypeVar("NotificationT", bound="Notification")
ResultT = TypeVar("ResultT", bound="Result")


class ProtocolModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


def _fields_from_params(
    cls: type[BaseModel], params: dict[str, Any], skip: set[str]
) -> dict[str, Any]:
    # Aliases are the wire names, field names are the Python names.
    kwargs: dict[str, Any] = {}
    for field_name, field_info in cls.model_fields.items():
        if field_name in skip:
            continue
        key = field_info.alias or field_name
        if key in params:
            kwargs[field_name] = params[key]
    return kwargs


def _check_method(cls: type[BaseModel], data: dict[str, Any]) -> None:
    method_field = cls.model_fields.get("method")
    if method_field and isinstance(method_field.default, str):
        if data.get("method") != method_field.default:
            raise ValueError(
                f"Can't create {cls.__name__} from '{data.get('method')}' method"
            )


class Request(ProtocolModel):
    """
    Base class for typed MCP request payloads.

    A typed request knows its method and its params. The JSON-RPC envelope (the
    id) is added by `JSONRPCRequest.from_request`.
    """

    metadata: dict[str, Any] | None = Field(default=None)
    """
    Request metadata, sent as `params._meta`.
    """

    @classmethod
    def from_protocol(cls: type[RequestT], data: dict[str, Any]) -> RequestT:
        """Build from a `{method, params}` mapping."""
        _check_method(cls, data)
        params = data.get("params") or {}
        kwargs = _fields_from_params(cls, params, {"metadata"})
        if params.get("_meta"):
            kwargs["metadata"] = params["_meta"]
        return cls(**kwargs)

    def to_protocol(self) -> dict[str, Any]:
        params = self.model_dump(
            exclude={"method", "metadata"},
            by_alias=True,
            exclude_none=True,
            mode="json",
        )
        if self.metadata:
            params["_meta"] = self.metadata

        # Every concrete subclass declares `method`.
        result: dict[str, Any] = {"method": self.method}  # type: ignore[attr-defined]
        if params:
            result["params"] = params
        return result


class PaginatedRequest(Request):
    """A list request that may carry a pagination cursor."""

    cursor: Cursor | None = None


class Notification(ProtocolModel):
    """
    Base class for typed MCP notifications. Notifications are never answered.
    """

    metadata: dict[str, Any] | None = Field(default=None)

    @classmethod
    def from_protocol(cls: type[NotificationT], data: dict[str, Any]) -> NotificationT:
        _check_method(cls, data)
        params = data.get("params") or {}
        kwargs = _fields_from_params(cls, params, {"metadata"})
        if params.get("_meta"):
            kwargs["metadata"] = params["_meta"]
        return cls(**kwargs)

    def to_protocol(self) -> dict[str, Any]:
        params = self.model_dump(
            exclude={"method", "metadata"},
            by_alias=True,
            exclude_none=True,
            mode="json",
        )
        if self.metadata:
            params["_meta"] = self.metadata

        result: dict[str, Any] = {"method": self.method}  # type: ignore[attr-defined]
        if params:
            result["params"] = params
        return result


class Result(ProtocolModel):
    """
    Base class for typed MCP results, the `result` member of a response.
    """

    metadata: dict[str, Any] | None = Field(default=None)

    @classmethod
    def from_protocol(cls: type[ResultT], data: dict[str, Any]) -> ResultT:
        kwargs = _fields_from_params(cls, data, {"metadata"})
        if data.get("_meta"):
            kwargs["metadata"] = data["_meta"]
        return cls(**kwargs)

    def to_protocol(self) -> dict[str, Any]:
        result = self.model_dump(
            exclude={"metadata"},
            by_alias=True,
            exclude_none=True,
            mode="json",
        )
        if self.metadata:
            result["_meta"] = self.metadata
        return result


class EmptyResult(Result):
    """Success with no data."""


class PaginatedResult(Result):
    next_cursor: Cursor | None = Field(default=None, alias="nextCursor")
    """
    Cursor for the next page, if more results exist.
    """


# JSON-RPC 2.0 reserved codes.
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# MCP codes, taken from the implementation-defined server error range.
VALIDATION_ERROR = -32001
RESOURCE_NOT_FOUND = -32002
TOOL_NOT_FOUND = -32003


class Error(ProtocolModel):
    """
    Error object carried by a failed response.

    Example:
        Error(code=METHOD_NOT_FOUND, message="Method not found: foo")
        Error.internal_error("boom", data=exc)
    """

    code: int
    message: str
    data: JsonValue = None
    """
    Additional error details. Exceptions are converted to formatted tracebacks.
    """

    @field_validator("data", mode="before")
    @classmethod
    def transform_data(cls, value: Any) -> Any:
        if isinstance(value, BaseException):
            return "".join(
                traceback.format_exception(type(value), value, value.__traceback__)
            )
        return value

    def to_protocol(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")

    @classmethod
    def from_protocol(cls, data: dict[str, Any]) -> Self:
        return cls.model_validate(
            {
                "code": data["code"],
                "message": data["message"],
                "data": data.get("data"),
            }
        )

    @classmethod
    def parse_error(cls, message: str = "Parse error", data: Any = None) -> Self:
        return cls(code=PARSE_ERROR, message=message, data=data)

    @classmethod
    def invalid_request(cls, message: str = "Invalid request", data: Any = None) -> Self:
        return cls(code=INVALID_REQUEST, message=message, data=data)

    @classmethod
    def method_not_found(cls, method: str) -> Self:
        return cls(code=METHOD_NOT_FOUND, message=f"Method not found: {method}")

    @classmethod
    def invalid_params(cls, message: str = "Invalid params", data: Any = None) -> Self:
        return cls(code=INVALID_PARAMS, message=message, data=data)

    @classmethod
    def internal_error(cls, message: str = "Internal error", data: Any = None) -> Self:
        return cls(code=INTERNAL_ERROR, message=message, data=data)

    @classmethod
    def validation_error(cls, message: str, data: Any = None) -> Self:
        return cls(code=VALIDATION_ERROR, message=message, data=data)

    @classmethod
    def resource_not_found(cls, uri: str) -> Self:
        return cls(code=RESOURCE_NOT_FOUND, message=f"Resource not found: {uri}")

    @classmethod
    def tool_not_found(cls, name: str) -> Self:
        return cls(code=TOOL_NOT_FOUND, message=f"Tool not found: {name}")
