"""
Scoring module for post quality / spam scoring.
评分模块，用于帖子质量与垃圾内容评分。
"""

from .rules import RULES, Rule, RuleKind, describe_rules
from .spam_scorer import (
    BASE_SCORE,
    SPAM_THRESHOLD,
    ScoreResult,
    SpamScorer,
    Verdict,
    score,
)

__all__ = [
    'RULES',
    'Rule',
    'RuleKind',
    'describe_rules',
    'BASE_SCORE',
    'SPAM_THRESHOLD',
    'ScoreResult',
    'SpamScorer',
    'Verdict',
    'score',
]
