from __future__ import annotations

import asyncio
from collections import deque

from fastapi import WebSocket


class GameWebSocketHub:
    """In-process WebSocket fan-out for the running game.

    Contract:
      - engine observers call `publish(payload)` synchronously; payloads are only buffered.
      - `flush()` sends everything buffered, in order, to every connected socket.
      - sockets that fail to receive are dropped.

    Payloads should be JSON-serializable dicts.
    """

    def __init__(self) -> None:
        self._conns: set[WebSocket] = set()
        self._outbox: deque[dict[str, object]] = deque()
        self._lock = asyncio.Lock()

    @property
    def connections(self) -> int:
        return len(self._conns)

    async def connect(self, websocket: WebSocket) -> None:
        # Register before accepting so nothing published after the handshake is missed.
        async with self._lock:
            self._conns.add(websocket)
        await websocket.accept()

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self._conns.discard(websocket)

    def publish(self, payload: dict[str, object]) -> None:
        self._outbox.append(payload)

    async def flush(self) -> int:
        sent = 0
        while self._outbox:
            await self.broadcast(self._outbox.popleft())
            sent += 1
        return sent

    async def broadcast(self, payload: dict[str, object]) -> None:
        async with self._lock:
            conns = list(self._conns)

        if not conns:
            return

        dead: list[WebSocket] = []
        for ws in conns:
            try:
                await ws.send_json(payload)
            except Exception:
                dead.append(ws)

        if dead:
            async with self._lock:
                for ws in dead:
                    self._conns.discard(ws)
