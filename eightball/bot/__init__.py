"""机器人核心：会话上下文、分发循环与回复生成。"""

from eightball.bot.context import SessionContext
from eightball.bot.loop import DispatchLoop, LoopState
from eightball.bot.responder import post_reply
from eightball.bot.runner import run_bot

__all__ = ["SessionContext", "DispatchLoop", "LoopState", "post_reply", "run_bot"]
