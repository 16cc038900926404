from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcp_harness.protocol.base import Error


class HarnessError(Exception):
    """Base class for everything the harness raises."""


class ConstructionError(HarnessError, ValueError):
    """
    A message could not be built, typically because its params are not
    JSON-serializable. Raised when the message is built, never at send time.
    """


class TransportError(HarnessError, ConnectionError):
    """
    The transport failed to carry a message, had nothing to deliver where a
    message was expected, or delivered a message of the wrong kind.
    """


class ProtocolError(HarnessError):
    """
    The peer broke the protocol: a response with neither result nor error, a
    result that does not decode into the expected type, a mismatched id.

    Distinct from `MCPError`, where the peer followed the protocol and
    reported a failure.
    """


class MCPError(HarnessError):
    """
    Raised when a well-formed error response arrives for a request.
    """

    def __init__(
        self, error: "Error", transport_metadata: dict[str, Any] | None = None
    ):
        super().__init__(error.message)
        self.error = error
        self.transport_metadata = transport_metadata

    @property
    def code(self) -> int:
        return self.error.code


class ExpectationError(HarnessError, AssertionError):
    """Some expected requests never arrived at a MockServer."""

    def __init__(self, unmet: dict[str, int]):
        self.unmet = dict(unmet)
        details = ", ".join(
            f"{method} ({count} remaining)" for method, count in self.unmet.items()
        )
        super().__init__(f"Unmet expectations for methods: {details}")


class NotInitializedError(HarnessError, RuntimeError):
    """An operation needs a completed initialize handshake."""
