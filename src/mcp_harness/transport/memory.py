import copy
import logging
from collections import deque
from typing import Any

from mcp_harness.protocol.jsonrpc import JSONRPCMessage, parse_message
from mcp_harness.shared.exceptions import TransportError
from mcp_harness.transport.base import Transport, TransportMessage

logger = logging.getLogger(__name__)


class MemoryTransport(Transport):
    """
    In-process FIFO transport.

    Messages are stored as wire dictionaries and parsed again on read, so
    everything that passes through is exactly what a peer would see.
    """

    def __init__(self) -> None:
        self._buffer: deque[tuple[dict[str, Any], dict[str, Any] | None]] = deque()
        self.sent_messages: list[TransportMessage] = []
        self.closed = False

    async def write(
        self, message: JSONRPCMessage, metadata: dict[str, Any] | None = None
    ) -> None:
        if self.closed:
            raise TransportError("Transport closed")
        self._buffer.append((copy.deepcopy(message.to_wire()), metadata))
        self.sent_messages.append(TransportMessage(message=message, metadata=metadata))
        logger.debug("Buffered %s (%d pending)", type(message).__name__, len(self._buffer))

    async def read(self) -> TransportMessage | None:
        if self.closed:
            raise TransportError("Transport closed")
        if not self._buffer:
            return None
        payload, metadata = self._buffer.popleft()
        return TransportMessage(message=parse_message(payload), metadata=metadata)

    def queue_payload(
        self, payload: dict[str, Any], metadata: dict[str, Any] | None = None
    ) -> None:
        """Inject a raw wire dictionary to be returned by the next `read()`."""
        self._buffer.append((copy.deepcopy(payload), metadata))

    @property
    def pending(self) -> int:
        return len(self._buffer)

    async def clear(self) -> None:
        self._buffer.clear()
        self.sent_messages.clear()

    async def close(self) -> None:
        self.closed = True
