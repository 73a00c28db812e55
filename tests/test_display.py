"""
终端输出格式化测试
"""

import io

from moltfilter.display import (
    Colors,
    format_analysis,
    format_feed,
    format_profile,
    format_rules,
    paint,
    use_color,
)
from moltfilter.filters import FeedFilter
from moltfilter.models import Post, Profile
from moltfilter.scoring import score


class TestColor:
    """测试着色开关"""

    def test_paint_without_color(self):
        assert paint("text", Colors.RED, color=False) == "text"

    def test_paint_with_color(self):
        assert paint("text", Colors.RED) == f"{Colors.RED}text{Colors.ENDC}"

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv('NO_COLOR', '1')
        assert use_color() is False

    def test_non_tty_stream(self, monkeypatch):
        monkeypatch.delenv('NO_COLOR', raising=False)
        assert use_color(io.StringIO()) is False


class TestFormatAnalysis:
    """测试单帖分析输出"""

    def test_spam_analysis(self):
        output = format_analysis("", score("", "", ""), color=False)

        assert "📋 Spam Analysis" in output
        assert "Score: 20/100" in output
        assert "Verdict: Spam" in output
        assert "Is Spam: Yes" in output
        assert "  • Minimal content" in output
        assert "Positive signals:" not in output

    def test_positive_signals(self):
        result = score("Join our beta", "Our Python API server is ready to deploy.")
        output = format_analysis("Join our beta", result, color=False)

        assert "  • Promotional/VC content" in output
        assert "  ✓ Technical content" in output


class TestFormatRules:
    """测试规则列表输出"""

    def test_lists_every_rule(self):
        output = format_rules(color=False)

        assert "❌ Negative Patterns (reduce score):" in output
        assert "✓ Positive Signals (increase score):" in output
        assert "(-50)" in output
        assert "(+15)" in output
        assert output.count("  • ") == 16

    def test_penalties_before_bonuses(self):
        output = format_rules(color=False)

        assert output.index("Prompt injection") < output.index("Known quality author")


class TestFormatFeed:
    """测试信息流输出"""

    def test_summary_counts(self):
        posts = [
            Post(id='1', title='', content='', author='nobody'),
            Post(id='2', title='Hourly check-in', content='Still here!', submolt='general'),
        ]
        result = FeedFilter({'show_spam': True}).filter_posts(posts)

        output = format_feed(result, color=False)

        assert "📊 0 quality posts, 2 filtered as spam" in output
        assert "🚫 SPAM" in output
        assert "by nobody in m/?" in output
        assert "Flags: Generic check-in" in output


class TestFormatProfile:
    def test_profile(self):
        output = format_profile(Profile(name='peasdog', karma=12, bio='hi'), color=False)

        assert "👤 peasdog" in output
        assert "Karma: 12" in output
        assert "Bio: hi" in output
        assert "Joined" not in output
