"""Registry of the browser tabs listening for push events.

The registry is the only owner of the set of connections. Every access goes \
through `add`, `remove` and `broadcast`, which serialize on an asyncio lock. \
Sending happens outside of the lock, concurrently, so that one slow tab cannot \
delay the others.
"""

from asyncio import Lock, gather, wait_for
from itertools import count
from logging import getLogger

from ..exceptions import PushConnectionError
from ..models import PushEvent
from .protocols import BroadcasterProtocol, PushConnectionProtocol

_logger = getLogger(__name__)


class ConnectionRegistry(BroadcasterProtocol):
    def __init__(self, send_timeout: float = 5.0) -> None:
        self._send_timeout = send_timeout
        self._connections: dict[int, PushConnectionProtocol] = {}
        self._ids = count(1)
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._connections)

    async def add(self, connection: PushConnectionProtocol) -> int:
        async with self._lock:
            connection_id = next(self._ids)
            self._connections[connection_id] = connection
        _logger.debug(f"Connection {connection_id} registered")
        return connection_id

    async def remove(self, connection_id: int) -> None:
        async with self._lock:
            removed = self._connections.pop(connection_id, None)
        if removed is not None:
            _logger.debug(f"Connection {connection_id} removed")

    async def broadcast(self, event: PushEvent) -> int:
        """Send an event to every registered connection.

        Each connection gets one attempt. Connections that fail or time out are \
        removed, the others are not affected.

        Args:
            event: Event to push.

        Returns:
            Number of connections that received the event.
        """
        message = event.model_dump_json()
        async with self._lock:
            targets = list(self._connections.items())
        results = await gather(
            *(self._send(connection_id, c, message) for connection_id, c in targets),
            return_exceptions=True,
        )
        failed = []
        for (connection_id, _), result in zip(targets, results, strict=True):
            if isinstance(result, BaseException):
                _logger.warning(str(result))
                failed.append(connection_id)
        if failed:
            async with self._lock:
                for connection_id in failed:
                    self._connections.pop(connection_id, None)
        delivered = len(targets) - len(failed)
        _logger.info(
            f"Sent {event.type} to {delivered} tab{'s' if delivered != 1 else ''}"
        )
        return delivered

    async def close_all(self) -> None:
        async with self._lock:
            connections = list(self._connections.values())
            self._connections.clear()
        for connection in connections:
            try:
                await connection.close()
            except Exception as e:
                _logger.debug(f"Closing a connection failed: {e}")

    async def _send(
        self, connection_id: int, connection: PushConnectionProtocol, message: str
    ) -> None:
        try:
            await wait_for(connection.send_text(message), self._send_timeout)
        except TimeoutError as e:
            msg = f"connection {connection_id} timed out, dropping it"
            raise PushConnectionError(msg) from e
        except Exception as e:
            msg = f"sending to connection {connection_id} failed, dropping it: {e}"
            raise PushConnectionError(msg) from e
