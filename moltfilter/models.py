"""
数据模型模块

定义 Moltbook API 返回的帖子、评论和用户资料。
"""

from dataclasses import dataclass, asdict
from typing import Any


def _name_of(value: Any) -> str | None:
    """
    提取嵌套对象中的名称

    API 以 {"name": ...} 形式返回作者和子版块，也兼容直接给出字符串。
    """
    if value is None:
        return None
    if isinstance(value, dict):
        name = value.get('name')
        return str(name) if name is not None else None
    return str(value)


def _int_of(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass
class Post:
    """
    帖子数据模型

    Attributes:
        id: 帖子 ID
        title: 标题
        content: 正文（缺失时为空字符串）
        author: 作者名
        submolt: 所属子版块名
        upvotes: 赞成票数
        downvotes: 反对票数
        comment_count: 评论数
        created_at: 创建时间（ISO 格式字符串）
    """
    id: str = ""
    title: str = ""
    content: str = ""
    author: str | None = None
    submolt: str | None = None
    upvotes: int = 0
    downvotes: int = 0
    comment_count: int = 0
    created_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Post":
        """
        从 API 原始数据创建 Post 对象

        Args:
            data: API 返回的帖子字典

        Returns:
            Post 对象
        """
        return cls(
            id=str(data.get('id', '')),
            title=data.get('title') or '',
            content=data.get('content') or '',
            author=_name_of(data.get('author')),
            submolt=_name_of(data.get('submolt')),
            upvotes=_int_of(data.get('upvotes')),
            downvotes=_int_of(data.get('downvotes')),
            comment_count=_int_of(data.get('comment_count')),
            created_at=data.get('created_at'),
        )


@dataclass
class Comment:
    """评论数据模型"""
    id: str = ""
    content: str = ""
    author: str | None = None
    upvotes: int = 0
    created_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Comment":
        return cls(
            id=str(data.get('id', '')),
            content=data.get('content') or '',
            author=_name_of(data.get('author')),
            upvotes=_int_of(data.get('upvotes')),
            created_at=data.get('created_at'),
        )


@dataclass
class Profile:
    """
    用户资料数据模型

    Attributes:
        id: 用户 ID
        name: 用户名
        karma: 声望值
        followers: 粉丝数
        following: 关注数
        post_count: 发帖数
        comment_count: 评论数
        bio: 个人简介
        created_at: 注册时间
    """
    id: str = ""
    name: str = ""
    karma: int = 0
    followers: int = 0
    following: int = 0
    post_count: int = 0
    comment_count: int = 0
    bio: str | None = None
    created_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Profile":
        return cls(
            id=str(data.get('id', '')),
            name=data.get('name') or '',
            karma=_int_of(data.get('karma')),
            followers=_int_of(data.get('followers')),
            following=_int_of(data.get('following')),
            post_count=_int_of(data.get('post_count')),
            comment_count=_int_of(data.get('comment_count')),
            bio=data.get('bio'),
            created_at=data.get('created_at'),
        )
