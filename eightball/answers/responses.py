"""魔力 8 号球的罐头回复。"""

import random


RESPONSES: tuple[str, ...] = (
    "Signs point to no.",
    "Yes.",
    "Reply hazy, try again.",
    "Without a doubt.",
    "My sources say no.",
    "As I see it, yes.",
    "You may rely on it.",
    "Concentrate and ask again.",
    "Outlook not so good.",
    "It is decidedly so.",
    "Better not tell you now.",
    "Very doubtful.",
    "Yes - definitely.",
    "It is certain.",
    "Cannot predict now.",
    "Most likely.",
    "Ask again later.",
    "My reply is no.",
    "Outlook good.",
    "Don't count on it.",
)


def pick_response(
    rng: random.Random | None = None,
    table: tuple[str, ...] = RESPONSES,
) -> str:
    """从回复表中均匀随机地选择一条回复。"""
    return (rng or random).choice(table)
