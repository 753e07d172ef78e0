import asyncio
import json
from typing import Any

import httpx
import pytest
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK

from eightball.bot.context import SessionContext
from eightball.rtm.session import DuplexSession


class FakeWebSocket:
    """内存中的 WebSocket 替身：recv() 读取预置帧，推入 None 表示对端挂断。"""

    def __init__(
        self,
        frames: list[str | bytes] = (),
        hang_up_after_sends: int | None = None,
        fail_sends: bool = False,
        gate: asyncio.Event | None = None,
    ):
        self.incoming: asyncio.Queue[str | bytes | None] = asyncio.Queue()
        for frame in frames:
            self.incoming.put_nowait(frame)
        self.hang_up_after_sends = hang_up_after_sends
        self.fail_sends = fail_sends
        self.gate = gate
        self.sent: list[str] = []
        self.closed = False
        self.url: str | None = None

    def push(self, frame: str | bytes | dict[str, Any]) -> None:
        if isinstance(frame, dict):
            frame = json.dumps(frame)
        self.incoming.put_nowait(frame)

    def hang_up(self) -> None:
        self.incoming.put_nowait(None)

    async def recv(self) -> str | bytes:
        frame = await self.incoming.get()
        if frame is None:
            raise ConnectionClosedOK(None, None)
        return frame

    async def send(self, data: str) -> None:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_sends or self.closed:
            raise ConnectionClosedError(None, None)
        self.sent.append(data)
        if self.hang_up_after_sends is not None and len(self.sent) >= self.hang_up_after_sends:
            self.hang_up()

    async def close(self) -> None:
        self.closed = True

    @property
    def sent_messages(self) -> list[dict[str, Any]]:
        return [json.loads(s) for s in self.sent]


def message_frame(text: str, channel: str = "C1", user: str = "U999") -> str:
    return json.dumps({
        "type": "message",
        "channel": channel,
        "user": user,
        "text": text,
        "ts": "1355517523.000005",
    })


def handshake_transport(body: Any, status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body)
    return httpx.MockTransport(handler)


@pytest.fixture
def context() -> SessionContext:
    return SessionContext("U123")


@pytest.fixture
def ws() -> FakeWebSocket:
    return FakeWebSocket()


@pytest.fixture
def session(ws: FakeWebSocket, context: SessionContext) -> DuplexSession:
    return DuplexSession(ws, context)
