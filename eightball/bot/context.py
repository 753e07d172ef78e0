"""在分发循环和回复任务之间共享的会话上下文。"""

import itertools

from eightball.rtm.events import HandshakeResult


class SessionContext:
    """
    持有机器人身份和出站消息 ID 计数器。
    
    身份在构造后只读。next_id() 不会挂起，因此在同一事件循环上的
    并发回复任务之间是原子的：每个 ID 只发放一次，并按发放顺序严格递增。
    """

    def __init__(self, bot_id: str):
        if not bot_id:
            raise ValueError("机器人身份不能为空")
        self._bot_id = bot_id
        self._ids = itertools.count(1)

    @classmethod
    def from_handshake(cls, result: HandshakeResult) -> "SessionContext":
        return cls(result.bot_id)

    @property
    def bot_id(self) -> str:
        return self._bot_id

    @property
    def mention(self) -> str:
        """提及前缀，例如 "<@U123>"。"""
        return f"<@{self._bot_id}>"

    def next_id(self) -> int:
        """分配下一个出站消息 ID。"""
        return next(self._ids)

    def addressed_query(self, text: str) -> str | None:
        """
        如果消息以提及前缀开头，返回去掉前缀和首尾空白后的问题。
        
        前缀匹配区分大小写；提及出现在其他位置时返回 None。
        """
        if not text.startswith(self.mention):
            return None
        return text[len(self.mention):].strip()
