"""
BaseFetcher - Fetcher 基类和 FetchResult 数据类
BaseFetcher - Base Fetcher Class and FetchResult Data Class

定义信息流 Fetcher 的统一接口和获取结果的数据结构。
Defines the unified interface for feed Fetchers and the data structure for fetch results.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from moltfilter.models import Post


@dataclass
class FetchResult:
    """
    获取结果数据类
    Fetch Result Data Class

    Attributes:
        items: 获取的帖子列表
               List of fetched posts
        source_name: 数据源名称，如 'Moltbook new'
                     Name of the data source
        error: 错误信息（如有），获取成功时为 None
               Error message if any, None when fetch is successful

    Examples:
        >>> result = FetchResult(items=[Post(id='1', title='Hi')], source_name='Moltbook new')
        >>> result.is_success()
        True
        >>> len(result)
        1
    """
    items: list[Post] = field(default_factory=list)
    source_name: str = ""
    error: str | None = None

    def is_success(self) -> bool:
        """
        检查获取是否成功
        Check if the fetch was successful
        """
        return self.error is None

    def __len__(self) -> int:
        return len(self.items)


class BaseFetcher(ABC):
    """
    Fetcher 抽象基类
    Abstract Base Class for Fetchers

    设计原则 Design Principles:
    - 统一接口：所有 Fetcher 通过相同的 fetch() 方法获取数据
    - 容错性：fetch() 返回 FetchResult，错误信息通过 error 字段传递
    """

    @abstractmethod
    def fetch(self) -> FetchResult:
        """
        获取数据
        Fetch data from the data source

        实现类应处理所有可能的异常，并通过 FetchResult.error 字段报告错误，
        而不是抛出异常。
        Implementations should report errors through FetchResult.error instead
        of raising.
        """
        pass
