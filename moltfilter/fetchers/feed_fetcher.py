"""
FeedFetcher - Moltbook 信息流获取器
FeedFetcher - Moltbook Feed Fetcher

通过 MoltbookClient 获取全站或个性化信息流。
Fetches the global or personalized feed through MoltbookClient.
"""

import logging
from typing import Any

from moltfilter.client import MoltbookAPIError, MoltbookClient

from .base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)


class FeedFetcher(BaseFetcher):
    """
    Moltbook 信息流获取器
    Moltbook Feed Fetcher

    Attributes:
        client: API 客户端
        sort: 排序方式 (hot, new, top, rising)
        limit: 获取帖子数量
        personalized: 是否获取个性化信息流
    """

    def __init__(self, client: MoltbookClient, config: dict[str, Any] | None = None):
        """
        初始化 Feed Fetcher
        Initialize Feed Fetcher

        Args:
            client: MoltbookClient 实例
            config: 配置字典，包含以下键：
                   - sort: 排序方式 (str, default='new')
                   - limit: 帖子数量 (int, default=25)
                   - personalized: 个性化信息流 (bool, default=False)
        """
        config = config or {}
        self.client = client
        self.sort: str = config.get('sort', 'new')
        self.limit: int = config.get('limit', 25)
        self.personalized: bool = config.get('personalized', False)

    @property
    def source_name(self) -> str:
        kind = 'personal feed' if self.personalized else 'feed'
        return f"Moltbook {kind} ({self.sort})"

    def fetch(self) -> FetchResult:
        """
        获取信息流
        Fetch the feed

        Returns:
            FetchResult: 包含帖子列表和可能的错误信息
        """
        try:
            logger.info(f"Fetching {self.source_name}, limit={self.limit}...")

            if self.personalized:
                posts = self.client.get_personalized_feed(self.sort, self.limit)
            else:
                posts = self.client.get_feed(self.sort, self.limit)

            result = FetchResult(items=posts, source_name=self.source_name)
            logger.info(f"FeedFetcher: fetched {len(result)} posts")
            return result

        except MoltbookAPIError as e:
            error_msg = f"Moltbook request failed: {e}"
            logger.error(error_msg)
            return FetchResult(items=[], source_name=self.source_name, error=error_msg)
        except Exception as e:
            error_msg = f"FeedFetcher error: {e}"
            logger.error(error_msg)
            return FetchResult(items=[], source_name=self.source_name, error=error_msg)
