"""会话引导：通过一次 HTTP 请求获取双工通道地址和机器人身份。"""

import httpx
from loguru import logger
from pydantic import ValidationError

from eightball.config.schema import RtmConfig
from eightball.rtm.errors import (
    HandshakeParseError,
    HandshakeRejected,
    HandshakeTransportError,
)
from eightball.rtm.events import HandshakeResult


async def start_session(
    token: str,
    config: RtmConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HandshakeResult:
    """
    执行握手。
    
    在握手完成之前没有其他步骤可以进行，因此调用方应该直接等待它。
    
    参数：
        token：会话令牌。
        config：RTM 配置，未提供时使用默认值。
        transport：可选的 httpx 传输层（用于测试）。
    
    返回：
        包含双工通道地址和非空机器人身份的握手结果。
    
    抛出：
        HandshakeTransportError：请求无法完成。
        HandshakeParseError：响应体格式不正确。
        HandshakeRejected：服务返回 ok=false。
    """
    config = config or RtmConfig()
    url = f"{config.api_base.rstrip('/')}/{config.start_method}"

    logger.info(f"正在向 {url} 请求 RTM 会话...")
    try:
        async with httpx.AsyncClient(timeout=config.timeout, transport=transport) as client:
            response = await client.get(url, params={"token": token})
    except httpx.HTTPError as e:
        raise HandshakeTransportError(f"联系聊天服务时出错：{e}") from e

    try:
        result = HandshakeResult.model_validate_json(response.content)
    except ValidationError as e:
        raise HandshakeParseError(
            f"无法解析握手响应（HTTP {response.status_code}）：{e}"
        ) from e

    if not result.ok:
        raise HandshakeRejected(result.error or "未知错误")

    if not result.url:
        raise HandshakeParseError("握手响应缺少双工通道地址")
    if not result.bot_id:
        raise HandshakeParseError("握手响应缺少机器人身份")

    logger.debug(f"握手成功，机器人身份：{result.bot_id}")
    return result
