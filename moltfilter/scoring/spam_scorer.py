"""
SpamScorer - 帖子质量/垃圾内容评分器
SpamScorer - Post Quality / Spam Scorer

基于静态加权规则表对帖子进行评分。
Scores posts against the static weighted rule table.

评分流程 Scoring flow:
1. 基础分 50 / base score 50
2. 按规则表顺序求值，命中即累加权重 / evaluate rules in table order, sum weights
3. 裁剪到 [0, 100] / clamp to [0, 100]
4. 分数 < 30 判定为垃圾 / score < 30 is spam
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from .rules import RULES, PostText, Rule, RuleKind

logger = logging.getLogger(__name__)


BASE_SCORE = 50
SPAM_THRESHOLD = 30
MIN_SCORE = 0
MAX_SCORE = 100


class Verdict(str, Enum):
    """评分结论 Scoring verdict"""
    QUALITY = "Quality"
    SPAM = "Spam"


@dataclass(frozen=True)
class ScoreResult:
    """
    评分结果
    Score Result

    Attributes:
        score: 裁剪后的分数 (0-100)
        verdict: Quality 或 Spam
        fired_rules: 命中的规则名称，按规则表顺序
    """
    score: int
    verdict: Verdict
    fired_rules: tuple[str, ...] = ()

    @property
    def is_spam(self) -> bool:
        return self.verdict is Verdict.SPAM

    @property
    def flags(self) -> list[str]:
        """命中的扣分规则 Fired penalty rules"""
        return [name for name in self.fired_rules if _RULE_KINDS.get(name) is RuleKind.PENALTY]

    @property
    def positive_signals(self) -> list[str]:
        """命中的加分规则 Fired bonus rules"""
        return [name for name in self.fired_rules if _RULE_KINDS.get(name) is RuleKind.BONUS]

    def to_dict(self) -> dict[str, Any]:
        return {
            'score': self.score,
            'verdict': self.verdict.value,
            'fired_rules': list(self.fired_rules),
        }


_RULE_KINDS: dict[str, RuleKind] = {rule.name: rule.kind for rule in RULES}


def clamp_score(value: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, value))


def verdict_for(score: int) -> Verdict:
    return Verdict.SPAM if score < SPAM_THRESHOLD else Verdict.QUALITY


class SpamScorer:
    """
    帖子评分器
    Post Scorer

    无状态、线程安全：只读取模块级的不可变规则表。
    Stateless and thread-safe: it only reads the immutable rule table.

    Attributes:
        rules: 使用的规则序列（默认为全局规则表）
        max_workers: 批量评分时的并发线程数，1 表示串行
    """

    def __init__(self, rules: Sequence[Rule] = RULES, max_workers: int = 1):
        self.rules: tuple[Rule, ...] = tuple(rules)
        self.max_workers: int = max(1, max_workers)

    def score(self, title: str | None, content: str | None, author: str | None = None) -> ScoreResult:
        """
        对单个帖子评分
        Score a single post

        Args:
            title: 标题，可为空
            content: 正文，可为空
            author: 作者名，可为空

        Returns:
            ScoreResult
        """
        post = PostText.build(title, content, author)
        total = BASE_SCORE
        fired: list[str] = []

        for rule in self.rules:
            if rule.matches(post):
                total += rule.weight
                fired.append(rule.name)

        final = clamp_score(total)
        result = ScoreResult(score=final, verdict=verdict_for(final), fired_rules=tuple(fired))
        logger.debug(f"Scored post {post.title[:40]!r}: raw={total} final={final} rules={fired}")
        return result

    def score_post(self, post: Any) -> ScoreResult:
        """对带有 title/content/author 属性的对象评分"""
        return self.score(
            getattr(post, 'title', ''),
            getattr(post, 'content', ''),
            getattr(post, 'author', None),
        )

    def score_posts(self, posts: Iterable[Any]) -> list[ScoreResult]:
        """
        批量评分
        Score posts in batch

        max_workers > 1 时使用线程池并发评分，结果顺序与输入一致。
        With max_workers > 1 posts are scored in a thread pool; results keep
        the input order.

        Args:
            posts: 带有 title/content/author 属性的对象序列

        Returns:
            与输入顺序一致的 ScoreResult 列表
        """
        posts = list(posts)
        if self.max_workers > 1 and len(posts) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(self.score_post, posts))
        else:
            results = [self.score_post(post) for post in posts]

        if results:
            avg_score = sum(r.score for r in results) / len(results)
            spam_count = sum(1 for r in results if r.is_spam)
            logger.info(
                f"SpamScorer: scored {len(results)} posts, "
                f"avg score: {avg_score:.1f}, spam: {spam_count}"
            )

        return results


_DEFAULT_SCORER = SpamScorer()


def score(title: str | None, content: str | None, author: str | None = None) -> ScoreResult:
    """
    使用默认规则表评分（独立函数）
    Score with the default rule table (standalone function)

    Examples:
        >>> result = score("", "", "")
        >>> result.score, result.fired_rules
        (20, ('Minimal content',))
    """
    return _DEFAULT_SCORER.score(title, content, author)
