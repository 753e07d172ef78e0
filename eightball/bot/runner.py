"""把握手、双工会话和分发循环连接起来。"""

import random

import httpx
import websockets
from loguru import logger

from eightball.bot.context import SessionContext
from eightball.bot.loop import DispatchLoop
from eightball.config.schema import Config
from eightball.rtm.handshake import start_session
from eightball.rtm.session import Connector, open_session


async def run_bot(
    token: str,
    config: Config | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    connect: Connector = websockets.connect,
    rng: random.Random | None = None,
) -> DispatchLoop:
    """
    运行一次会话，直到双工通道关闭。
    
    启动错误（StartupError 的子类）会传播给调用方。通道建立之后的错误
    只会结束循环，函数正常返回。
    
    参数：
        token：会话令牌。
        config：配置，未提供时使用默认值。
        transport：可选的 httpx 传输层（用于测试）。
        connect：建立 WebSocket 连接的可等待工厂。
        rng：可选的随机数生成器。
    
    返回：
        已结束的分发循环。
    """
    config = config or Config()

    result = await start_session(token, config.rtm, transport=transport)
    context = SessionContext.from_handshake(result)
    logger.info(f"已作为 {context.bot_id} 登录")

    async with open_session(result.url, context, connect=connect) as session:
        loop = DispatchLoop(
            session,
            context,
            rng=rng,
            max_pending=config.bot.max_pending_replies,
        )
        await loop.run()

    logger.info("会话已结束")
    return loop
