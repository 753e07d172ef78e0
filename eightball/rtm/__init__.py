"""实时消息（RTM）会话：握手、双工通道与帧格式。"""

from eightball.rtm.events import HandshakeResult, InboundMessage, OutgoingMessage
from eightball.rtm.handshake import start_session
from eightball.rtm.session import DuplexSession, open_session

__all__ = [
    "HandshakeResult",
    "InboundMessage",
    "OutgoingMessage",
    "start_session",
    "DuplexSession",
    "open_session",
]
