"""
eightball - 回答 @提及 问题的魔力 8 号球聊天机器人
"""

__version__ = "0.1.0"
__logo__ = "🎱"
