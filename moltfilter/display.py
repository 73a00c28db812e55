"""
终端输出格式化模块

渲染信息流、单帖分析、规则列表和用户资料，使用 ANSI 颜色。
设置 NO_COLOR 环境变量或输出不是终端时不着色。
"""

import os
import sys

from moltfilter.filters import FeedFilterResult, ScoredPost
from moltfilter.models import Comment, Post, Profile
from moltfilter.scoring import RuleKind, ScoreResult, describe_rules


class Colors:
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    CYAN = '\033[96m'
    DIM = '\033[2m'
    BOLD = '\033[1m'
    ENDC = '\033[0m'


RULE_LINE = "━"


def use_color(stream=None) -> bool:
    stream = stream or sys.stdout
    if os.environ.get('NO_COLOR'):
        return False
    return hasattr(stream, 'isatty') and stream.isatty()


def paint(text: str, *styles: str, color: bool = True) -> str:
    if not color or not styles:
        return text
    return f"{''.join(styles)}{text}{Colors.ENDC}"


def feed_score_color(score: int) -> str:
    if score >= 70:
        return Colors.GREEN
    if score >= 40:
        return Colors.YELLOW
    return Colors.RED


def format_feed_entry(item: ScoredPost, color: bool = True) -> str:
    """
    格式化单条信息流帖子

    Args:
        item: 带评分的帖子
        color: 是否着色

    Returns:
        多行字符串
    """
    post, result = item.post, item.result
    score = paint(str(result.score), feed_score_color(result.score), color=color)
    status = (
        paint("🚫 SPAM", Colors.RED, color=color)
        if result.is_spam
        else paint("✓ OK", Colors.GREEN, color=color)
    )
    lines = [
        f"[{score}] {status} {paint(post.title, Colors.BOLD, color=color)}",
        f"    by {paint(post.author or 'unknown', Colors.CYAN, color=color)} in m/{post.submolt or '?'}",
    ]
    if result.flags:
        lines.append(f"    Flags: {paint(', '.join(result.flags), Colors.DIM, color=color)}")
    return "\n".join(lines)


def format_feed(filter_result: FeedFilterResult, color: bool = True) -> str:
    """格式化完整信息流及统计"""
    separator = paint(RULE_LINE * 60, Colors.DIM, color=color)
    blocks = [separator, ""]
    for item in filter_result.shown:
        blocks.append(format_feed_entry(item, color=color))
        blocks.append("")
    blocks.append(separator)
    blocks.append(
        f"📊 {paint(str(filter_result.quality_count), Colors.GREEN, color=color)} quality posts, "
        f"{paint(str(filter_result.spam_count), Colors.RED, color=color)} filtered as spam"
    )
    return "\n".join(blocks)


def format_analysis(title: str, result: ScoreResult, color: bool = True) -> str:
    """
    格式化单帖分析结果

    Args:
        title: 帖子标题
        result: 评分结果
        color: 是否着色
    """
    score_style = Colors.GREEN if result.score >= 50 else Colors.RED
    lines = [
        "",
        paint("📋 Spam Analysis", Colors.BOLD, color=color),
        RULE_LINE * 40,
        f"Title: {paint(title, Colors.CYAN, color=color)}",
        f"Score: {paint(str(result.score), score_style, color=color)}/100",
        f"Verdict: {paint(result.verdict.value, Colors.RED if result.is_spam else Colors.GREEN, color=color)}",
        f"Is Spam: {paint('Yes', Colors.RED, color=color) if result.is_spam else paint('No', Colors.GREEN, color=color)}",
    ]
    if result.flags:
        lines.append("")
        lines.append("Flags:")
        lines.extend(f"  • {paint(flag, Colors.YELLOW, color=color)}" for flag in result.flags)
    if result.positive_signals:
        lines.append("")
        lines.append("Positive signals:")
        lines.extend(f"  ✓ {paint(signal, Colors.GREEN, color=color)}" for signal in result.positive_signals)
    return "\n".join(lines)


def format_rules(color: bool = True) -> str:
    """格式化规则列表（不对帖子求值）"""
    rules = describe_rules()
    lines = [
        "",
        paint("🔍 Spam Detection Rules", Colors.BOLD, color=color),
        RULE_LINE * 40,
        "",
        paint("❌ Negative Patterns (reduce score):", Colors.RED, color=color),
    ]
    lines.extend(
        f"  • {name}: {description} ({weight})"
        for name, weight, kind, description in rules
        if kind is RuleKind.PENALTY
    )
    lines.append("")
    lines.append(paint("✓ Positive Signals (increase score):", Colors.GREEN, color=color))
    lines.extend(
        f"  • {name}: {description} (+{weight})"
        for name, weight, kind, description in rules
        if kind is RuleKind.BONUS
    )
    return "\n".join(lines)


def format_post_created(post: Post, color: bool = True) -> str:
    return f"{paint('✓ Posted', Colors.GREEN, color=color)} {post.id}: {paint(post.title, Colors.BOLD, color=color)}"


def format_comment(comment: Comment, result: ScoreResult, color: bool = True) -> str:
    score = paint(str(result.score), feed_score_color(result.score), color=color)
    author = paint(comment.author or 'unknown', Colors.CYAN, color=color)
    return f"[{score}] {author} (▲{comment.upvotes}): {comment.content}"


def format_profile(profile: Profile, color: bool = True) -> str:
    lines = [
        "",
        paint(f"👤 {profile.name}", Colors.BOLD, color=color),
        RULE_LINE * 40,
        f"Karma: {profile.karma}",
        f"Followers: {profile.followers}  Following: {profile.following}",
        f"Posts: {profile.post_count}  Comments: {profile.comment_count}",
    ]
    if profile.bio:
        lines.append(f"Bio: {profile.bio}")
    if profile.created_at:
        lines.append(f"Joined: {profile.created_at}")
    return "\n".join(lines)
