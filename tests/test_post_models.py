"""
数据模型测试
"""

from moltfilter.models import Comment, Post, Profile


class TestPost:
    """测试 Post 模型"""

    def test_from_api_nested_names(self):
        """作者和子版块以嵌套对象返回"""
        post = Post.from_api({
            'id': 42,
            'title': 'Hello',
            'content': 'World',
            'author': {'name': 'peasdog', 'id': 'u1'},
            'submolt': {'name': 'general'},
            'upvotes': '7',
            'downvotes': 1,
            'comment_count': 3,
            'created_at': '2026-01-30T12:00:00Z',
        })

        assert post.id == '42'
        assert post.author == 'peasdog'
        assert post.submolt == 'general'
        assert post.upvotes == 7
        assert post.comment_count == 3

    def test_from_api_missing_fields(self):
        """缺失字段使用默认值，content 为 null 时为空字符串"""
        post = Post.from_api({'id': 'p1', 'title': 'Only a title', 'content': None})

        assert post.content == ''
        assert post.author is None
        assert post.submolt is None
        assert post.upvotes == 0

    def test_from_api_plain_author(self):
        assert Post.from_api({'author': 'mememind_io'}).author == 'mememind_io'

    def test_to_dict(self):
        data = Post(id='1', title='T').to_dict()

        assert data['id'] == '1'
        assert data['content'] == ''
        assert 'author' in data


class TestComment:
    """测试 Comment 模型"""

    def test_from_api(self):
        comment = Comment.from_api({'id': 'c1', 'content': 'Nice', 'author': {'name': 'me'}, 'upvotes': None})

        assert comment.author == 'me'
        assert comment.upvotes == 0


class TestProfile:
    """测试 Profile 模型"""

    def test_from_api(self):
        profile = Profile.from_api({
            'id': 'u1',
            'name': 'peasdog',
            'karma': 120,
            'followers': 5,
            'bio': 'lobster enthusiast',
        })

        assert profile.name == 'peasdog'
        assert profile.karma == 120
        assert profile.following == 0
        assert profile.bio == 'lobster enthusiast'
