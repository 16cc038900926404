"""Transport layer abstraction for the harness."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Self

from mcp_harness.protocol.jsonrpc import JSONRPCMessage


@dataclass
class TransportMessage:
    """A message with any transport-specific metadata."""

    message: JSONRPCMessage
    metadata: dict[str, Any] | None = None


class Transport(ABC):
    """Ordered message pipe between the harness and a handler under test.

    Moves messages without knowing protocol semantics or correlation. Reads
    never block: `read()` returns None when nothing is waiting.
    """

    @abstractmethod
    async def write(
        self, message: JSONRPCMessage, metadata: dict[str, Any] | None = None
    ) -> None:
        """Write one message.

        Raises:
            TransportError: If the message cannot be carried.
        """

    @abstractmethod
    async def read(self) -> TransportMessage | None:
        """Read the oldest message, or None if no message is available.

        Raises:
            TransportError: If the transport is unusable.
            ProtocolError: If the carried data is not a valid message.
        """

    @abstractmethod
    async def clear(self) -> None:
        """Drop every buffered message."""

    @abstractmethod
    async def close(self) -> None:
        """Close the transport."""

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
        return None
