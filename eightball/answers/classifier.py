"""决定如何回答一条问题的分类器。"""

import random
import re
from enum import Enum

from eightball.answers.responses import RESPONSES, pick_response


MISSING_QUESTION_REPLY = "Where's the question?"
OPEN_QUESTION_REPLY = "I'm not a tarot deck. Yes or no questions please."

# 只匹配前缀："however?" 和 "iffy?" 同样算作开放式问题
_OPEN_QUESTION_RE = re.compile(r"^(who|what|when|where|why|how|if)")


class QueryKind(Enum):
    """问题的种类。"""

    NOT_A_QUESTION = "not_a_question"  # 没有以 "?" 结尾
    OPEN_ENDED = "open_ended"  # 无法用是/否回答
    YES_NO = "yes_no"


def classify(query: str) -> QueryKind:
    """
    对去掉提及前缀后的问题进行分类。
    
    参数：
        query：已去除首尾空白的问题文本。
    
    返回：
        问题的种类。
    """
    if not query.endswith("?"):
        return QueryKind.NOT_A_QUESTION
    if _OPEN_QUESTION_RE.match(query.lower()):
        return QueryKind.OPEN_ENDED
    return QueryKind.YES_NO


def reply_for(
    query: str,
    rng: random.Random | None = None,
    table: tuple[str, ...] = RESPONSES,
) -> str:
    """为问题选择回复文本。"""
    kind = classify(query)
    if kind is QueryKind.NOT_A_QUESTION:
        return MISSING_QUESTION_REPLY
    if kind is QueryKind.OPEN_ENDED:
        return OPEN_QUESTION_REPLY
    return pick_response(rng, table)
