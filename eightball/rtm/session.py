"""包装单个 WebSocket 连接的双工会话。"""

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator, Awaitable, Callable

import websockets
from loguru import logger
from websockets.exceptions import InvalidStatus, WebSocketException

from eightball.rtm.errors import (
    DuplexConnectError,
    EncodeError,
    ReceiveError,
    TransportWriteError,
)
from eightball.rtm.events import OutgoingMessage

if TYPE_CHECKING:
    from eightball.bot.context import SessionContext


Connector = Callable[[str], Awaitable[Any]]


class DuplexSession:
    """
    已建立的双工通道。
    
    receive() 只能由一个读取者调用；send() 可以被多个回复任务并发调用，
    写入由锁串行化，两条消息的帧不会交错。
    """

    def __init__(self, ws: Any, context: "SessionContext"):
        self._ws = ws
        self.context = context
        self._write_lock = asyncio.Lock()
        self._degraded = False

    @property
    def degraded(self) -> bool:
        """是否发生过写入失败。"""
        return self._degraded

    async def receive(self) -> str | bytes:
        """
        等待下一帧。
        
        抛出：
            ReceiveError：通道已关闭或读取失败。
        """
        try:
            return await self._ws.recv()
        except (WebSocketException, OSError) as e:
            raise ReceiveError(str(e) or type(e).__name__) from e

    async def send(self, channel: str, text: str) -> OutgoingMessage:
        """
        在频道中发送一条回复。
        
        参数：
            channel：目标频道 ID。
            text：回复文本。
        
        返回：
            已发送的消息（包含分配的 ID）。
        
        抛出：
            EncodeError：消息无法序列化，回复被丢弃。
            TransportWriteError：写入失败，会话处于降级状态。
        """
        msg = OutgoingMessage(id=self.context.next_id(), channel=channel, text=text)
        try:
            frame = msg.to_frame()
        except (TypeError, ValueError) as e:
            raise EncodeError(f"无法序列化消息 #{msg.id}：{e}") from e

        async with self._write_lock:
            try:
                await self._ws.send(frame)
            except (WebSocketException, OSError) as e:
                self._degraded = True
                raise TransportWriteError(f"无法写入消息 #{msg.id}：{e}") from e

        return msg

    async def close(self) -> None:
        """关闭底层连接。"""
        await self._ws.close()


def _log_bad_upgrade(error: InvalidStatus) -> None:
    """记录升级被拒绝时的状态码和响应头。"""
    response = error.response
    logger.error("双工通道握手出错：")
    logger.error(f"\t状态：{response.status_code}")
    for name, value in response.headers.raw_items():
        logger.error(f"\t {name} = {value}")


@asynccontextmanager
async def open_session(
    url: str,
    context: "SessionContext",
    connect: Connector = websockets.connect,
) -> AsyncIterator[DuplexSession]:
    """
    打开双工会话，并在退出作用域时（无论以何种方式）关闭连接。
    
    参数：
        url：握手返回的 wss:// 地址。
        context：会话上下文（身份和出站 ID 计数器）。
        connect：建立 WebSocket 连接的可等待工厂。
    
    抛出：
        DuplexConnectError：无法建立连接。
    """
    logger.info("正在连接到双工通道...")
    try:
        ws = await connect(url)
    except InvalidStatus as e:
        _log_bad_upgrade(e)
        raise DuplexConnectError(f"建立连接时出错：{e}") from e
    except (WebSocketException, OSError) as e:
        raise DuplexConnectError(f"建立连接时出错：{e}") from e

    session = DuplexSession(ws, context)
    logger.info("已连接到双工通道")
    try:
        yield session
    finally:
        await session.close()
        logger.debug("双工通道已关闭")
