from typing import Any, Literal

from pydantic import Field

from .base import PROTOCOL_VERSION, Notification, ProtocolModel, Request, Result


class Implementation(ProtocolModel):
    """Name and version of a client or server."""

    name: str
    version: str


class RootsCapability(ProtocolModel):
    list_changed: bool | None = Field(default=None, alias="listChanged")


class ClientCapabilities(ProtocolModel):
    """
    Capabilities a client advertises in its initialize request.
    """

    experimental: dict[str, Any] | None = None
    roots: RootsCapability | None = None
    sampling: dict[str, Any] | None = None


class PromptsCapability(ProtocolModel):
    list_changed: bool | None = Field(default=None, alias="listChanged")


class ResourcesCapability(ProtocolModel):
    subscribe: bool | None = None
    list_changed: bool | None = Field(default=None, alias="listChanged")


class ToolsCapability(ProtocolModel):
    list_changed: bool | None = Field(default=None, alias="listChanged")


class ServerCapabilities(ProtocolModel):
    """
    Capabilities a server advertises in its initialize result.

    A capability is supported when its member is present, even if empty.
    """

    experimental: dict[str, Any] | None = None
    logging: dict[str, Any] | None = None
    completions: dict[str, Any] | None = None
    prompts: PromptsCapability | None = None
    resources: ResourcesCapability | None = None
    tools: ToolsCapability | None = None

    def supports(self, capability: str) -> bool:
        if capability not in type(self).model_fields:
            raise ValueError(f"Unknown capability: {capability}")
        return getattr(self, capability) is not None


class InitializeRequest(Request):
    """
    First request of the handshake. Carries the client's identity, the protocol
    version it speaks and the capabilities it offers.
    """

    method: Literal["initialize"] = "initialize"
    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: ClientCapabilities = Field(default_factory=ClientCapabilities)
    client_info: Implementation = Field(alias="clientInfo")


class InitializedNotification(Notification):
    """
    Last step of the handshake, sent by the client once it has accepted the
    server's InitializeResult.
    """

    method: Literal["notifications/initialized"] = "notifications/initialized"


class InitializeResult(Result):
    """
    Server's answer to `initialize`.

    `protocolVersion`, `capabilities` and `serverInfo` are all required; a
    payload missing any of them does not decode.
    """

    protocol_version: str = Field(alias="protocolVersion")
    capabilities: ServerCapabilities
    server_info: Implementation = Field(alias="serverInfo")
    instructions: str | None = None
