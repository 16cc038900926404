from pydantic import ConfigDict, Field

from mcp_harness.protocol.base import PROTOCOL_VERSION, ProtocolModel
from mcp_harness.protocol.initialization import ClientCapabilities, Implementation


def default_client_info() -> Implementation:
    return Implementation(name="mock-client", version="1.0.0")


class HarnessSettings(ProtocolModel):
    """
    How a TestHarness presents itself during the handshake.

    Example:
        settings = HarnessSettings(
            client_info=Implementation(name="my-tests", version="0.1"),
            require_protocol_version=True,
        )
        harness = TestHarness(server, settings=settings)
    """

    model_config = ConfigDict(extra="forbid")

    client_info: Implementation = Field(default_factory=default_client_info)
    capabilities: ClientCapabilities = Field(default_factory=ClientCapabilities)
    protocol_version: str = PROTOCOL_VERSION
    require_protocol_version: bool = False
    """
    Reject an initialize result whose protocolVersion differs from
    `protocol_version`.
    """
