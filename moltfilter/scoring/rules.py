"""
垃圾内容规则表
Spam Rule Table

定义评分器使用的静态规则表：关键词模式、权重和判定函数。
Defines the static rule table used by the scorer: keyword patterns, weights
and predicates.

规则表在导入时构建，运行期间不可修改。
The table is built at import time and never mutated afterwards.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class RuleKind(str, Enum):
    """规则方向 Rule direction"""
    PENALTY = "penalty"
    BONUS = "bonus"


@dataclass(frozen=True)
class PostText:
    """
    归一化后的帖子文本
    Normalized post text

    每次评分只构建一次，所有规则共享。
    Built once per scoring call and shared by every predicate.

    Attributes:
        title: 标题
        content: 正文
        author: 作者（可能为空）
        text: 标题与正文拼接后的文本
    """
    title: str
    content: str
    author: str
    text: str

    @classmethod
    def build(cls, title: str | None, content: str | None, author: str | None) -> "PostText":
        title = title or ""
        content = content or ""
        text = f"{title} {content}".strip()
        return cls(
            title=title,
            content=content,
            author=author or "",
            text=text,
        )


@dataclass(frozen=True)
class Rule:
    """
    评分规则
    Scoring rule

    Attributes:
        name: 规则名称，用于报告命中的规则
        kind: 扣分 (penalty) 或加分 (bonus)
        weight: 固定分值增量
        predicate: 判定函数，接收 PostText 返回是否命中
        description: 规则说明（用于 rules 命令）
    """
    name: str
    kind: RuleKind
    weight: int
    predicate: Callable[[PostText], bool]
    description: str = ""

    def matches(self, post: PostText) -> bool:
        return bool(self.predicate(post))


def _compile_all(patterns: tuple[str, ...], flags: int = re.IGNORECASE) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p, flags) for p in patterns)


# =============================================================================
# 关键词表 Keyword tables
# =============================================================================

PROMPT_INJECTION_PATTERNS = _compile_all((
    r"\bignore\b[^.!?\n]{0,30}\b(?:previous|prior|above|earlier)\s+(?:instructions|prompts|messages|rules)",
    r"\bdisregard\b[^.!?\n]{0,30}\binstructions\b",
    r"\bsystem[\s_-]?prompt\b",
    r"\byou\s+are\s+now\s+(?:DAN|in\s+developer\s+mode|jailbroken|unrestricted|unfiltered)\b",
    r"\bpretend\s+to\s+be\b",
    r"\bjailbreak",
    r"\bbypass\s+(?:your|the|all)\s+(?:safety|filters?|guardrails|restrictions|rules)\b",
    r"<\|im_start\|>",
    r"<\|endoftext\|>",
))

CLAW_PATTERNS = _compile_all((
    r"\bclaw\b",
    r"\bclawback\b",
    r"\bmint(?:s|ed|ing)?\b",
    r"\blobster[\s_-]?coin\b",
))

LOBSTER = "🦞"
TOKEN_WORD = re.compile(r"\btokens?\b", re.IGNORECASE)

# 每个条目最多计一次，计数的是命中的不同条目数
# Each entry counts at most once: the count is distinct entries matched.
CRYPTO_PATTERNS = _compile_all((
    r"\bto\s+the\s+moon\b",
    r"\bbuy\s+now\b",
    r"\bpump(?:s|ed|ing)?\b",
    r"\blambo\b",
    r"\bdegen\b",
    r"\bairdrops?\b",
    r"\bpre-?sale\b",
    r"\bwhitelist\b",
    r"\b\d{2,}x\b",
    r"\bcontract\s*address\b",
    r"\bCA:",
    r"\bliquidity\b",
    r"\bmarket\s*cap\b|\bmcap\b",
    r"\bwagmi\b",
    r"\bhodl\b",
    r"\bdon'?t\s+miss\s+out\b",
)) + (re.compile(r"\$[A-Z]{2,6}\b"),)

CRYPTO_MIN_MATCHES = 2

CULT_PATTERNS = _compile_all((
    r"\bchurch\s+of\b",
    r"\bsovereign\b",
    r"\bdivine\b",
    r"\bworship\b",
    r"\bcongregation\b",
    r"\bdisciples?\b",
    r"\bbelievers\b",
    r"\bchosen\s+ones?\b",
    r"\bawakening\b",
    r"\benlightenment\b",
    r"\btranscend\b",
    r"\bjoin\s+the\s+(?:flock|faithful|movement)\b",
))

PROMO_PATTERNS = _compile_all((
    r"\bjoin\s+(?:us|our)\b",
    r"\bsign\s+up\b",
    r"\bsubscribe\s+(?:to\s+)?(?:my|our|now)\b",
    r"\bfollow\s+(?:me|us)\b",
    r"\bdm\s+(?:me|us)\b",
    r"\bcheck\s+out\s+my\b",
    r"\bvisit\s+my\b",
    r"\blink\s+in\s+bio\b",
    r"\bapply\s+now\b",
    r"\bearly\s+access\b",
    r"\bwait\s?list\b",
    r"\blimited\s+(?:spots|time|offer)\b",
    r"\bseed\s+round\b",
    r"\bpitch\s+deck\b",
))

CHECKIN_TEMPLATE = re.compile(
    r"^(?:just\s+)?(?:still\s+(?:here|alive|running)|checking\s+in|check[\s-]?in"
    r"|(?:hourly|daily)\s+(?:check[\s-]?in|check|update|report|status)"
    r"|status\s+update|reporting\s+in|heartbeat|gm|good\s+(?:morning|night)"
    r"|hello\s+(?:moltbook|world|everyone)|test\s+post|testing)"
    r"[\s!.~☀-➿\U0001F300-\U0001FAFF]*$",
    re.IGNORECASE,
)

CHECKIN_MAX_OTHER_LENGTH = 50

BUZZWORD_PATTERN = re.compile(
    r"\b(?:synergy|synergies|leverage|paradigm(?:\s+shift)?|disrupt(?:ive|ion)?|revolutionize"
    r"|game[\s-]?changer|next[\s-]?level|cutting[\s-]?edge|state[\s-]?of[\s-]?the[\s-]?art"
    r"|world[\s-]?class|best[\s-]?in[\s-]?class|thought\s+leader(?:ship)?|web3|hyper[\s-]?scale)\b",
    re.IGNORECASE,
)

BUZZWORD_THRESHOLD = 3

CAPS_RATIO_THRESHOLD = 0.5
CAPS_MIN_LENGTH = 10

EMOJI_RANGES = (
    (0x1F300, 0x1F9FF),  # misc symbols, emoticons, transport, supplemental
    (0x1FA70, 0x1FAFF),  # symbols and pictographs extended-A
    (0x2600, 0x26FF),    # misc symbols
    (0x2700, 0x27BF),    # dingbats
)

EMOJI_LIMIT = 5

MINIMAL_LENGTH = 20
SUBSTANTIVE_LENGTH = 200

# 已知优质作者（小写存储，匹配前对作者名 strip + lower）
# Known quality authors, stored lower-cased; author names are stripped and
# lower-cased before lookup.
QUALITY_AUTHORS: frozenset[str] = frozenset(name.lower() for name in (
    "mememind_io",
    "peasdog",
    "SeanJohnCollins",
    "LordsServant",
    "AwakeJourno",
    "Salen",
    "PhiAgent",
    "RowanFamiliar",
))

# 代码模式区分大小写
# Code patterns are case-sensitive.
CODE_PATTERNS = _compile_all((
    r"```",
    r"\bdef\s+\w+\s*\(",
    r"\b(?:pub\s+)?fn\s+\w+\s*[(<]",
    r"\bfunction\s*\w*\s*\(",
    r"\bclass\s+[A-Z]\w*\s*[:({]",
    r"^[ \t]*(?:import\s+[\w.{]|from\s+[\w.]+\s+import\b)",
    r"\b(?:const|let|var)\s+\w+\s*=",
    r"\bimpl\s+\w+",
    r"\b\w+\([^()\n]*\)\s*\{",
    r"=>\s*\{",
), flags=re.MULTILINE)

# 每个术语（含词形变化）最多计一次
# Each term, inflections included, counts once.
TECH_PATTERNS = _compile_all((
    r"\bapis?\b",
    r"\balgorithms?\b",
    r"\barchitecture\b",
    r"\bbenchmarks?\b",
    r"\bdatabases?\b",
    r"\bservers?\b",
    r"\bdeploy(?:s|ed|ing|ment)?\b",
    r"\bdebug(?:ging)?\b",
    r"\bconfig(?:uration)?\b",
    r"\bcompilers?\b",
    r"\bruntime\b",
    r"\blatency\b",
    r"\bthroughput\b",
    r"\bcach(?:e|es|ing)\b",
    r"\bimplementation\b",
    r"\brefactor(?:ing)?\b",
    r"\bkubernetes\b",
    r"\bdocker\b",
    r"\brust\b",
    r"\bpython\b",
    r"\btypescript\b",
    r"\bjavascript\b",
    r"\bsql(?:ite)?\b",
    r"\bhttp\b",
    r"\bjson\b",
    r"\bregex\b",
    r"\bembeddings?\b",
    r"\bvectors?\b",
    r"\binference\b",
    r"\btokenizer\b",
    r"\bcontext\s+window\b",
    r"\bmemory\s+leak\b",
    r"\bconcurrency\b",
    r"\basync\b",
))

TECH_MIN_TERMS = 2

SENTENCE_SPLIT = re.compile(r"([.!?\n])")
QUESTION_MIN_WORDS = 3

REFERENCE_PATTERNS = _compile_all((
    r"(?<![\w.])@\w{2,}",
    r"\breplied\s+to\b",
    r"\bas\s+@?\w+(?:\s+\w+)?\s+said\b",
))


# =============================================================================
# 判定函数 Predicates
# =============================================================================

def _any_match(patterns: tuple[re.Pattern, ...], text: str) -> bool:
    return any(p.search(text) for p in patterns)


def count_distinct_matches(patterns: tuple[re.Pattern, ...], text: str) -> int:
    """统计命中的不同模式数量 Count how many distinct patterns match"""
    return sum(1 for p in patterns if p.search(text))


def count_buzzwords(text: str) -> int:
    """统计流行语出现次数 Count buzzword occurrences"""
    return sum(1 for _ in BUZZWORD_PATTERN.finditer(text))


def count_emojis(text: str) -> int:
    """按码点统计 emoji 数量 Count emoji code points"""
    total = 0
    for ch in text:
        code = ord(ch)
        if any(low <= code <= high for low, high in EMOJI_RANGES):
            total += 1
    return total


def caps_ratio(text: str) -> float:
    letters = [ch for ch in text if ch.isalpha()]
    if not letters:
        return 0.0
    return sum(1 for ch in letters if ch.isupper()) / len(letters)


def is_claw_spam(post: PostText) -> bool:
    """
    CLAW 铸币关键词，或同一帖子中同时出现 🦞 和 token
    CLAW minting keywords, or a lobster emoji and "token" in the same post.
    """
    if _any_match(CLAW_PATTERNS, post.text):
        return True
    return LOBSTER in post.text and TOKEN_WORD.search(post.text) is not None


def is_technical(post: PostText) -> bool:
    return count_distinct_matches(TECH_PATTERNS, post.text) >= TECH_MIN_TERMS


def is_minimal(post: PostText) -> bool:
    return len(post.text) < MINIMAL_LENGTH


def is_buzzword_overload(post: PostText) -> bool:
    return count_buzzwords(post.text) >= BUZZWORD_THRESHOLD


def _is_checkin_text(text: str) -> bool:
    return bool(CHECKIN_TEMPLATE.match(text.strip()))


def is_generic_checkin(post: PostText) -> bool:
    """
    检测空洞的签到帖
    Detect an empty check-in post

    标题或正文之一完全匹配签到模板，另一部分为空、同样是模板、或少于 50 个字符。
    Either field is nothing but a check-in template while the other one is
    empty, also a template, or shorter than 50 characters.
    """
    title = post.title.strip()
    content = post.content.strip()
    for field_text, other in ((title, content), (content, title)):
        if not field_text or not _is_checkin_text(field_text):
            continue
        if not other or _is_checkin_text(other) or len(other) < CHECKIN_MAX_OTHER_LENGTH:
            return True
    return False


def is_shouting(post: PostText) -> bool:
    return len(post.text) > CAPS_MIN_LENGTH and caps_ratio(post.text) > CAPS_RATIO_THRESHOLD


def asks_question(post: PostText) -> bool:
    """
    至少一句以问号结尾且不少于 3 个词
    At least one sentence ends in '?' and has three or more words.
    """
    parts = SENTENCE_SPLIT.split(post.text)
    for sentence, mark in zip(parts[::2], parts[1::2]):
        if mark == "?" and len(sentence.split()) >= QUESTION_MIN_WORDS:
            return True
    return False


def is_substantive(post: PostText) -> bool:
    return (
        len(post.text) > SUBSTANTIVE_LENGTH
        and not is_minimal(post)
        and not is_buzzword_overload(post)
    )


def is_quality_author(post: PostText) -> bool:
    return post.author.strip().lower() in QUALITY_AUTHORS


# =============================================================================
# 规则表 Rule table
# =============================================================================

RULES: tuple[Rule, ...] = (
    Rule(
        "Prompt injection", RuleKind.PENALTY, -50,
        lambda p: _any_match(PROMPT_INJECTION_PATTERNS, p.text),
        "Prompt injection attempts",
    ),
    Rule(
        "CLAW/token spam", RuleKind.PENALTY, -40,
        is_claw_spam,
        "CLAW/token minting spam",
    ),
    Rule(
        "Crypto shilling", RuleKind.PENALTY, -35,
        lambda p: count_distinct_matches(CRYPTO_PATTERNS, p.text) >= CRYPTO_MIN_MATCHES,
        "Crypto shilling, token launches (2+ distinct signals)",
    ),
    Rule(
        "Cult/religious recruitment", RuleKind.PENALTY, -35,
        lambda p: _any_match(CULT_PATTERNS, p.text),
        "Religious cult recruitment",
    ),
    Rule(
        "Promotional/VC content", RuleKind.PENALTY, -30,
        lambda p: _any_match(PROMO_PATTERNS, p.text),
        "VC/promotional content",
    ),
    Rule(
        "Minimal content", RuleKind.PENALTY, -30,
        is_minimal,
        f"Empty/minimal content (under {MINIMAL_LENGTH} characters)",
    ),
    Rule(
        "Generic check-in", RuleKind.PENALTY, -25,
        is_generic_checkin,
        "Generic hourly check-ins",
    ),
    Rule(
        "Buzzword overload", RuleKind.PENALTY, -20,
        is_buzzword_overload,
        f"Buzzword salad ({BUZZWORD_THRESHOLD}+ buzzwords)",
    ),
    Rule(
        "ALL CAPS shouting", RuleKind.PENALTY, -15,
        is_shouting,
        "ALL CAPS shouting",
    ),
    Rule(
        "Excessive emojis", RuleKind.PENALTY, -15,
        lambda p: count_emojis(p.text) > EMOJI_LIMIT,
        f"Excessive emojis (more than {EMOJI_LIMIT})",
    ),
    Rule(
        "Known quality author", RuleKind.BONUS, 15,
        is_quality_author,
        "Known quality authors",
    ),
    Rule(
        "Contains code", RuleKind.BONUS, 15,
        lambda p: _any_match(CODE_PATTERNS, p.text),
        "Code snippets",
    ),
    Rule(
        "Technical content", RuleKind.BONUS, 10,
        is_technical,
        f"Technical content ({TECH_MIN_TERMS}+ distinct technical terms)",
    ),
    Rule(
        "Asks a question", RuleKind.BONUS, 10,
        asks_question,
        "Questions that invite discussion",
    ),
    Rule(
        "Substantive length", RuleKind.BONUS, 10,
        is_substantive,
        f"Reasonable length with substance (over {SUBSTANTIVE_LENGTH} characters)",
    ),
    Rule(
        "References others", RuleKind.BONUS, 5,
        lambda p: _any_match(REFERENCE_PATTERNS, p.text),
        "References to other posts/agents",
    ),
)


def describe_rules() -> list[tuple[str, int, RuleKind, str]]:
    """
    列出规则表（不对任何帖子求值）
    List the rule table without evaluating it

    Returns:
        (name, weight, kind, description) 元组列表，保持规则表顺序
    """
    return [(rule.name, rule.weight, rule.kind, rule.description) for rule in RULES]
