"""
信息流过滤器模块

对信息流中的帖子评分，并按最低分数阈值决定是否展示。

过滤逻辑：
1. 分数 >= min_score 的帖子展示
2. show_spam 开启时展示全部帖子（用于调试）
3. 分别统计达标帖子数和垃圾帖子数
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from moltfilter.models import Post
from moltfilter.scoring import SPAM_THRESHOLD, ScoreResult, SpamScorer

logger = logging.getLogger(__name__)


DEFAULT_MIN_SCORE = SPAM_THRESHOLD


@dataclass
class ScoredPost:
    """
    带评分的帖子

    Attributes:
        post: 原始帖子
        result: 评分结果
    """
    post: Post
    result: ScoreResult

    @property
    def score(self) -> int:
        return self.result.score


@dataclass
class FeedFilterResult:
    """
    过滤结果数据模型

    Attributes:
        scored: 全部帖子及评分（保持原顺序）
        shown: 需要展示的帖子
        min_score: 使用的最低分数阈值
    """
    scored: list[ScoredPost] = field(default_factory=list)
    shown: list[ScoredPost] = field(default_factory=list)
    min_score: int = DEFAULT_MIN_SCORE

    @property
    def quality_count(self) -> int:
        """返回达到阈值的帖子数量"""
        return sum(1 for item in self.scored if passes_threshold(item.score, self.min_score))

    @property
    def spam_count(self) -> int:
        """返回被判定为垃圾的帖子数量"""
        return sum(1 for item in self.scored if item.result.is_spam)

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_score": self.min_score,
            "quality_count": self.quality_count,
            "spam_count": self.spam_count,
            "shown": [
                {"post": item.post.to_dict(), "result": item.result.to_dict()}
                for item in self.shown
            ],
        }


def passes_threshold(score: int, min_score: int) -> bool:
    """
    判断分数是否达到展示阈值（等于阈值也展示）

    Examples:
        >>> passes_threshold(30, 30)
        True
        >>> passes_threshold(29, 30)
        False
    """
    return score >= min_score


class FeedFilter:
    """
    信息流过滤器

    Attributes:
        scorer: 评分器
        min_score: 最低展示分数
        show_spam: 是否展示全部帖子
    """

    def __init__(self, config: dict | None = None, scorer: SpamScorer | None = None):
        """
        初始化过滤器

        Args:
            config: 配置字典，包含：
                - min_score: 最低展示分数 (int, default=30)
                - show_spam: 是否展示垃圾帖子 (bool, default=False)
                - max_workers: 评分线程数 (int, default=1)
            scorer: 评分器实例（可选）
        """
        config = config or {}
        self.min_score: int = int(config.get('min_score', DEFAULT_MIN_SCORE))
        self.show_spam: bool = bool(config.get('show_spam', False))
        self.scorer = scorer or SpamScorer(max_workers=int(config.get('max_workers', 1)))

    def should_show(self, result: ScoreResult) -> bool:
        return self.show_spam or passes_threshold(result.score, self.min_score)

    def filter_posts(self, posts: Sequence[Post]) -> FeedFilterResult:
        """
        对帖子评分并过滤

        Args:
            posts: 帖子列表

        Returns:
            FeedFilterResult
        """
        results = self.scorer.score_posts(posts)
        scored = [ScoredPost(post=post, result=result) for post, result in zip(posts, results)]
        shown = [item for item in scored if self.should_show(item.result)]

        filter_result = FeedFilterResult(scored=scored, shown=shown, min_score=self.min_score)
        logger.info(
            f"FeedFilter: {len(shown)}/{len(scored)} posts shown "
            f"(min_score={self.min_score}, show_spam={self.show_spam}), "
            f"{filter_result.spam_count} spam"
        )
        return filter_result
