"""握手结果与双工通道上的消息类型。"""

import json
from dataclasses import asdict, dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from eightball.rtm.errors import FrameDecodeError


class SelfInfo(BaseModel):
    """机器人自身的账户信息。"""
    model_config = ConfigDict(frozen=True)

    id: str = ""


class HandshakeResult(BaseModel):
    """rtm.start 的响应。启动时生成一次，之后不可变。"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ok: bool = False
    error: str | None = None
    url: str | None = None  # 双工通道的 wss:// 地址
    self_: SelfInfo = Field(default_factory=SelfInfo, alias="self")

    @property
    def bot_id(self) -> str:
        return self.self_.id


@dataclass
class InboundMessage:
    """从双工通道接收的一帧。"""

    type: str
    channel: str = ""
    user: str = ""
    text: str = ""
    ts: str = ""
    subtype: str | None = None

    @classmethod
    def from_frame(cls, raw: str | bytes) -> "InboundMessage":
        """
        解码原始帧。
        
        缺失或为 null 的字段视为空字符串。
        
        参数：
            raw：从通道读取的文本或字节。
        
        返回：
            解码后的消息。
        
        抛出：
            FrameDecodeError：帧不是 JSON 对象或字段类型错误。
        """
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise FrameDecodeError(f"无效的 JSON：{e}") from e

        if not isinstance(data, dict):
            raise FrameDecodeError(f"帧不是 JSON 对象：{type(data).__name__}")

        values: dict[str, str | None] = {}
        for key in ("type", "channel", "user", "text", "ts", "subtype"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise FrameDecodeError(f"字段 {key} 应该是字符串")
            values[key] = value

        return cls(
            type=values["type"] or "",
            channel=values["channel"] or "",
            user=values["user"] or "",
            text=values["text"] or "",
            ts=values["ts"] or "",
            subtype=values["subtype"],
        )


@dataclass
class OutgoingMessage:
    """要写入双工通道的回复。"""

    id: int
    channel: str
    text: str
    type: str = field(default="message", init=False)

    def to_frame(self) -> str:
        """序列化为线路格式。"""
        return json.dumps(asdict(self), ensure_ascii=False)
