# Filters module - 信息流过滤模块

from .feed_filter import (
    DEFAULT_MIN_SCORE,
    FeedFilter,
    FeedFilterResult,
    ScoredPost,
    passes_threshold,
)

__all__ = [
    "DEFAULT_MIN_SCORE",
    "FeedFilter",
    "FeedFilterResult",
    "ScoredPost",
    "passes_threshold",
]
