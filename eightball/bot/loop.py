"""分发循环：唯一的读取者，为每条提及机器人的消息派生回复任务。"""

import asyncio
import random
from enum import Enum

from loguru import logger

from eightball.answers.responses import RESPONSES
from eightball.bot.context import SessionContext
from eightball.bot.responder import post_reply
from eightball.rtm.errors import FrameDecodeError, ReceiveError
from eightball.rtm.events import InboundMessage
from eightball.rtm.session import DuplexSession


class LoopState(Enum):
    """分发循环的状态。TERMINATED 是终态。"""

    LISTENING = "listening"
    TERMINATED = "terminated"


class DispatchLoop:
    """
    从双工会话读取帧并分发回复。
    
    循环不会等待回复任务：慢的回复不会阻塞新消息的读取。
    回复任务之间没有顺序保证。
    """

    def __init__(
        self,
        session: DuplexSession,
        context: SessionContext,
        rng: random.Random | None = None,
        table: tuple[str, ...] = RESPONSES,
        max_pending: int | None = None,
    ):
        self.session = session
        self.context = context
        self.rng = rng
        self.table = table
        self.max_pending = max_pending
        self.state = LoopState.LISTENING
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """仍在运行的回复任务数量。"""
        return len(self._pending)

    async def run(self) -> None:
        """读取帧直到通道关闭或出错。"""
        logger.info(f"正在监听 {self.context.mention} 的提及...")

        while self.state is LoopState.LISTENING:
            try:
                raw = await self.session.receive()
            except ReceiveError as e:
                logger.warning(f"双工通道读取错误，停止监听：{e}")
                self.state = LoopState.TERMINATED
                break

            self.dispatch(raw)

    def dispatch(self, raw: str | bytes) -> asyncio.Task[None] | None:
        """
        处理一帧。
        
        参数：
            raw：从通道读取的原始帧。
        
        返回：
            派生的回复任务；帧被忽略时返回 None。
        """
        try:
            msg = InboundMessage.from_frame(raw)
        except FrameDecodeError as e:
            logger.debug(f"忽略无法解码的帧：{e}")
            return None

        if msg.type != "message":
            return None

        query = self.context.addressed_query(msg.text)
        if query is None:
            return None

        if self.max_pending is not None and len(self._pending) >= self.max_pending:
            logger.warning(
                f"回复任务过多（{len(self._pending)}），丢弃来自 {msg.user} 的问题"
            )
            return None

        logger.debug(f"收到来自 {msg.user} 在 {msg.channel} 中的问题：{query}")

        task = asyncio.create_task(
            post_reply(self.session, query, msg.channel, self.rng, self.table)
        )
        self._pending.add(task)
        task.add_done_callback(self._on_reply_done)
        return task

    def _on_reply_done(self, task: asyncio.Task[None]) -> None:
        """移除已完成的回复任务，并记录未处理的异常。"""
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.opt(exception=error).error(f"回复任务出错：{error}")

    async def drain(self) -> None:
        """等待所有仍在运行的回复任务完成。"""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
