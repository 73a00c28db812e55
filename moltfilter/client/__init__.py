# Client module - Moltbook API 客户端

from .moltbook_client import (
    DEFAULT_BASE_URL,
    FEED_SORTS,
    VOTE_ACTIONS,
    MoltbookAPIError,
    MoltbookClient,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "FEED_SORTS",
    "VOTE_ACTIONS",
    "MoltbookAPIError",
    "MoltbookClient",
]
