"""
MoltbookClient - Moltbook API 客户端
MoltbookClient - Moltbook API Client

封装 Moltbook REST API：信息流、帖子、投票、评论和用户资料。
Wraps the Moltbook REST API: feeds, posts, votes, comments and profiles.

所有失败（网络错误、非 2xx 状态、响应解析失败、success=false）
统一抛出 MoltbookAPIError。
Every failure (transport error, non-2xx status, undecodable body,
success=false) raises MoltbookAPIError.
"""

import logging
from typing import Any

import requests

from moltfilter.models import Comment, Post, Profile

logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://www.moltbook.com/api/v1"

FEED_SORTS = ('hot', 'new', 'top', 'rising')
VOTE_ACTIONS = ('upvote', 'downvote', 'unvote')


class MoltbookAPIError(Exception):
    """
    Moltbook API 错误
    Moltbook API Error

    Attributes:
        message: 错误描述信息
        status_code: HTTP 状态码（如有）
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MoltbookClient:
    """
    Moltbook API 客户端
    Moltbook API Client

    Attributes:
        api_key: API 密钥（Bearer 认证）
        base_url: API 根地址
        timeout: 请求超时时间（秒）
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: int = 30):
        if not api_key:
            raise ValueError("api_key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    @property
    def _headers(self) -> dict[str, str]:
        """获取请求头"""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
            "User-Agent": "moltbook-filter/0.1",
        }

    def _request(self, method: str, endpoint: str, **kwargs) -> dict[str, Any]:
        """
        发送 API 请求并校验响应信封
        Send an API request and validate the response envelope

        Args:
            method: HTTP 方法
            endpoint: API 端点（不含 base_url）
            **kwargs: 传递给 requests 的参数

        Returns:
            解码后的响应数据

        Raises:
            MoltbookAPIError: 请求失败或 API 返回错误
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {url}")

        try:
            response = requests.request(
                method, url, headers=self._headers, timeout=self.timeout, **kwargs
            )
        except requests.exceptions.Timeout:
            raise MoltbookAPIError(f"Request timeout after {self.timeout}s: {method} {endpoint}")
        except requests.exceptions.RequestException as e:
            raise MoltbookAPIError(f"Request failed: {e}")

        if not response.ok:
            message = f"API returned status {response.status_code}"
            if method != "GET" and response.text:
                message = f"{message}: {response.text}"
            raise MoltbookAPIError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise MoltbookAPIError(f"Failed to parse response: {e}", status_code=response.status_code)

        if not isinstance(data, dict):
            raise MoltbookAPIError("Failed to parse response: expected a JSON object")

        if not data.get('success', False):
            raise MoltbookAPIError(data.get('error') or "Unknown error", status_code=response.status_code)

        return data

    # ------------------------------------------------------------------
    # 信息流 Feeds
    # ------------------------------------------------------------------

    def get_feed(self, sort: str = 'new', limit: int = 25) -> list[Post]:
        """
        获取全站信息流
        Fetch the global feed

        Args:
            sort: 排序方式 (hot, new, top, rising)
            limit: 帖子数量

        Returns:
            Post 列表
        """
        data = self._request("GET", "/posts", params={'sort': sort, 'limit': limit})
        return [Post.from_api(raw) for raw in data.get('posts') or []]

    def get_personalized_feed(self, sort: str = 'new', limit: int = 25) -> list[Post]:
        """获取个性化信息流（订阅 + 关注）"""
        data = self._request("GET", "/feed", params={'sort': sort, 'limit': limit})
        return [Post.from_api(raw) for raw in data.get('posts') or []]

    # ------------------------------------------------------------------
    # 帖子 Posts
    # ------------------------------------------------------------------

    def get_post(self, post_id: str) -> Post:
        data = self._request("GET", f"/posts/{post_id}")
        raw = data.get('post')
        if not raw:
            raise MoltbookAPIError("Post not found")
        return Post.from_api(raw)

    def create_post(self, title: str, content: str, submolt: str | None = None) -> Post:
        """
        发布新帖子
        Create a new post

        Args:
            title: 标题
            content: 正文
            submolt: 子版块名（可选）

        Returns:
            创建后的 Post
        """
        payload: dict[str, Any] = {'title': title, 'content': content}
        if submolt:
            payload['submolt_name'] = submolt

        data = self._request("POST", "/posts", json=payload)
        raw = data.get('post')
        if not raw:
            raise MoltbookAPIError("No post in response")

        post = Post.from_api(raw)
        logger.info(f"Created post {post.id}: {post.title}")
        return post

    # ------------------------------------------------------------------
    # 投票 Votes
    # ------------------------------------------------------------------

    def upvote(self, post_id: str) -> None:
        self.vote(post_id, 'upvote')

    def downvote(self, post_id: str) -> None:
        self.vote(post_id, 'downvote')

    def unvote(self, post_id: str) -> None:
        self.vote(post_id, 'unvote')

    def vote(self, post_id: str, action: str) -> None:
        if action not in VOTE_ACTIONS:
            raise ValueError(f"Unknown vote action: {action}")
        self._request("POST", f"/posts/{post_id}/{action}")
        logger.info(f"{action} {post_id}")

    # ------------------------------------------------------------------
    # 评论 Comments
    # ------------------------------------------------------------------

    def comment(self, post_id: str, content: str) -> Comment:
        data = self._request("POST", f"/posts/{post_id}/comments", json={'content': content})
        raw = data.get('comment')
        if not raw:
            raise MoltbookAPIError("No comment in response")
        return Comment.from_api(raw)

    def get_comments(self, post_id: str) -> list[Comment]:
        data = self._request("GET", f"/posts/{post_id}/comments")
        return [Comment.from_api(raw) for raw in data.get('comments') or []]

    # ------------------------------------------------------------------
    # 用户资料 Profiles
    # ------------------------------------------------------------------

    def get_my_profile(self) -> Profile:
        data = self._request("GET", "/users/me")
        raw = data.get('user')
        if not raw:
            raise MoltbookAPIError("No user in response")
        return Profile.from_api(raw)

    def get_profile(self, username: str) -> Profile:
        data = self._request("GET", f"/users/{username}")
        raw = data.get('user')
        if not raw:
            raise MoltbookAPIError("User not found")
        return Profile.from_api(raw)
