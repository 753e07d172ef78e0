"""罐头回复表与问题分类器。"""

from eightball.answers.classifier import QueryKind, classify, reply_for
from eightball.answers.responses import RESPONSES, pick_response

__all__ = ["QueryKind", "classify", "reply_for", "RESPONSES", "pick_response"]
