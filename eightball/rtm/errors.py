"""eightball 的异常层次结构。"""


class EightballError(Exception):
    """所有 eightball 错误的基类。"""


class StartupError(EightballError):
    """启动阶段的致命错误，进程应以非零状态退出。"""


class HandshakeTransportError(StartupError):
    """握手请求本身无法完成。"""


class HandshakeParseError(StartupError):
    """握手响应体格式不正确。"""


class HandshakeRejected(StartupError):
    """握手响应可以解析，但服务拒绝了会话。"""

    def __init__(self, error: str):
        super().__init__(f"会话被拒绝：{error}")
        self.error = error


class DuplexConnectError(StartupError):
    """无法在握手返回的地址上建立双工连接。"""


class ReceiveError(EightballError):
    """双工通道关闭或读取失败。"""


class FrameDecodeError(EightballError):
    """入站帧不是格式正确的消息。"""


class EncodeError(EightballError):
    """出站消息无法序列化。"""


class TransportWriteError(EightballError):
    """出站帧写入失败。"""
