"""回复生成：在每个回复任务中运行。"""

import random

from loguru import logger

from eightball.answers.classifier import reply_for
from eightball.answers.responses import RESPONSES
from eightball.rtm.errors import EncodeError, TransportWriteError
from eightball.rtm.session import DuplexSession


async def post_reply(
    session: DuplexSession,
    query: str,
    channel: str,
    rng: random.Random | None = None,
    table: tuple[str, ...] = RESPONSES,
) -> None:
    """
    对问题分类并在来源频道中恰好发送一条回复。
    
    发送错误只记录日志，不会传播到分发循环。
    """
    text = reply_for(query, rng, table)
    try:
        msg = await session.send(channel, text)
    except EncodeError as e:
        logger.error(f"无法生成回复：{e}")
        return
    except TransportWriteError as e:
        logger.error(f"无法发送回复：{e}")
        return

    logger.debug(f"已在 {channel} 中回复 #{msg.id}：{text}")
