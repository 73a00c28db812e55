# Fetchers module - 数据获取模块
# 包含 BaseFetcher 基类、FetchResult 数据类和 Moltbook 信息流 Fetcher

from .base import BaseFetcher, FetchResult
from .feed_fetcher import FeedFetcher

__all__ = [
    "BaseFetcher",
    "FetchResult",
    "FeedFetcher",
]
