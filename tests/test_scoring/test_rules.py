"""
规则表测试
Tests for the spam rule table
"""

import pytest

from moltfilter.scoring import RULES, RuleKind, describe_rules
from moltfilter.scoring.rules import (
    PostText,
    asks_question,
    caps_ratio,
    count_buzzwords,
    count_emojis,
    is_generic_checkin,
    is_quality_author,
    is_shouting,
    is_substantive,
)


def _post(title="", content="", author=None) -> PostText:
    return PostText.build(title, content, author)


def _rule(name):
    return next(rule for rule in RULES if rule.name == name)


EXPECTED_TABLE = [
    ("Prompt injection", -50),
    ("CLAW/token spam", -40),
    ("Crypto shilling", -35),
    ("Cult/religious recruitment", -35),
    ("Promotional/VC content", -30),
    ("Minimal content", -30),
    ("Generic check-in", -25),
    ("Buzzword overload", -20),
    ("ALL CAPS shouting", -15),
    ("Excessive emojis", -15),
    ("Known quality author", 15),
    ("Contains code", 15),
    ("Technical content", 10),
    ("Asks a question", 10),
    ("Substantive length", 10),
    ("References others", 5),
]


class TestRuleTable:
    """测试规则表结构"""

    def test_names_and_weights(self):
        """规则名称、权重和顺序固定"""
        assert [(rule.name, rule.weight) for rule in RULES] == EXPECTED_TABLE

    def test_kind_matches_sign(self):
        """扣分规则权重为负，加分规则权重为正"""
        for rule in RULES:
            if rule.kind is RuleKind.PENALTY:
                assert rule.weight < 0
            else:
                assert rule.weight > 0

    def test_describe_rules(self):
        """describe_rules 不求值，只列出规则"""
        described = describe_rules()

        assert len(described) == 16
        assert [(name, weight) for name, weight, _, _ in described] == EXPECTED_TABLE
        assert all(description for _, _, _, description in described)


class TestPostText:
    """测试文本归一化"""

    def test_build_joins_fields(self):
        post = _post("Title", "Body", "me")
        assert post.text == "Title Body"

    def test_build_none_fields(self):
        post = PostText.build(None, None, None)
        assert post.text == ""
        assert post.author == ""


class TestKnownAuthor:
    """测试已知作者匹配"""

    @pytest.mark.parametrize("author", ["mememind_io", "  MememInd_IO ", "PHIAGENT", "salen"])
    def test_normalized_lookup(self, author):
        assert is_quality_author(_post(author=author)) is True

    @pytest.mark.parametrize("author", [None, "", "mememind", "spambot123"])
    def test_unknown_author(self, author):
        assert is_quality_author(_post(author=author)) is False


class TestCryptoRule:
    """测试加密货币喊单规则"""

    def test_single_signal_does_not_fire(self):
        """单个信号不触发"""
        assert not _rule("Crypto shilling").matches(_post("Thoughts", "The pump in my aquarium broke today"))

    def test_repeated_signal_counts_once(self):
        """同一信号重复出现只计一次"""
        assert not _rule("Crypto shilling").matches(_post("Deal", "buy now buy now buy now"))

    def test_two_distinct_signals_fire(self):
        assert _rule("Crypto shilling").matches(_post("Deal", "Airdrop is live, buy now"))

    def test_ticker_is_case_sensitive(self):
        """$TICKER 只匹配大写"""
        rule = _rule("Crypto shilling")
        assert rule.matches(_post("New coin", "$MOLT airdrop today"))
        assert not rule.matches(_post("New coin", "$molt airdrop today"))


class TestCheckinRule:
    """测试签到规则"""

    def test_template_with_short_other_field(self):
        assert is_generic_checkin(_post("Hourly check-in", "Still here!")) is True

    def test_template_only_title(self):
        assert is_generic_checkin(_post("gm", "")) is True

    def test_template_in_content(self):
        assert is_generic_checkin(_post("Status", "Checking in 🦞")) is True

    def test_long_other_field_does_not_fire(self):
        """另一部分内容充实时不触发"""
        post = _post(
            "Daily update",
            "Finished migrating the job queue to the new scheduler and cut p99 latency in half.",
        )
        assert is_generic_checkin(post) is False

    def test_template_must_match_whole_field(self):
        assert is_generic_checkin(_post("gm everyone, here is my benchmark writeup", "")) is False


class TestTextMetrics:
    """测试文本统计函数"""

    def test_count_emojis(self):
        assert count_emojis("🚀🔥💎 hi ✨") == 4
        assert count_emojis("plain text") == 0

    def test_caps_ratio(self):
        assert caps_ratio("ABcd") == 0.5
        assert caps_ratio("123 !!") == 0.0

    def test_shouting_needs_length(self):
        """短文本不判定为喊叫"""
        assert is_shouting(_post("OK", "")) is False
        assert is_shouting(_post("THIS IS LOUD", "")) is True

    def test_count_buzzwords(self):
        assert count_buzzwords("synergy and web3 are a paradigm shift") == 3

    def test_question_needs_three_words(self):
        assert asks_question(_post("Why?", "")) is False
        assert asks_question(_post("", "Does this scale well? I think so.")) is True

    def test_question_mark_must_end_sentence(self):
        assert asks_question(_post("", "Nothing to ask here. Really nothing")) is False


class TestSubstantiveRule:
    """测试长度加分规则"""

    def test_long_text(self):
        assert is_substantive(_post("Notes", "word " * 60)) is True

    def test_buzzword_overload_blocks_bonus(self):
        """流行语堆砌的长文不加分"""
        content = "We leverage synergy to revolutionize everything. " + "filler " * 40
        post = _post("Vision", content)

        assert len(post.text) > 200
        assert is_substantive(post) is False

    def test_short_text(self):
        assert is_substantive(_post("Short", "not long enough")) is False


class TestCodeAndReferences:
    """测试代码和引用规则"""

    @pytest.mark.parametrize("content", [
        "```\nprint('hi')\n```",
        "def handler(event):",
        "const total = items.length",
        "fn main() { }",
        "setup:\nimport numpy as np",
    ])
    def test_contains_code(self, content):
        assert _rule("Contains code").matches(_post("Snippet", content))

    def test_prose_is_not_code(self):
        assert not _rule("Contains code").matches(_post("Story", "I went to the market and let it be."))

    def test_mention_is_reference(self):
        assert _rule("References others").matches(_post("Reply", "Thanks @peasdog for the idea"))

    def test_email_is_not_reference(self):
        assert not _rule("References others").matches(_post("Contact", "mail me at a.b@example.com"))


class TestClawRule:
    """测试 CLAW/代币规则"""

    def test_minting_keyword(self):
        assert _rule("CLAW/token spam").matches(_post("Just minted", "my first batch"))

    @pytest.mark.parametrize("title, content", [
        ("🦞 launch", "new token drops tonight"),
        ("Tokens are live", "grab yours 🦞"),
    ])
    def test_lobster_with_token(self, title, content):
        """🦞 与 token 同时出现，顺序不限"""
        assert _rule("CLAW/token spam").matches(_post(title, content))

    def test_lobster_alone(self):
        assert not _rule("CLAW/token spam").matches(_post("🦞 Morning thoughts", "The reef is quiet today."))

    def test_token_alone(self):
        """只提到 token 不触发"""
        assert not _rule("CLAW/token spam").matches(_post("Tokenizer notes", "Each token maps to an id."))


class TestTechnicalRule:
    """测试技术内容规则"""

    def test_single_term_does_not_fire(self):
        assert not _rule("Technical content").matches(_post("Question", "send me your API keys"))

    def test_repeated_term_counts_once(self):
        """同一术语重复出现只计一次"""
        assert not _rule("Technical content").matches(_post("Cache", "cache, caching and more caches"))

    def test_two_distinct_terms_fire(self):
        assert _rule("Technical content").matches(_post("Deploy notes", "The API server restarted twice."))
