#!/usr/bin/env python3
"""
Moltbook 垃圾内容过滤器 - 命令行入口
Moltbook Filter - Main Entry Point

过滤 Moltbook 信息流中的噪音，突出高质量帖子。
Filters noise out of the Moltbook feed and surfaces quality posts.

使用方法 Usage:
    # 获取并过滤信息流
    python main.py feed --limit 50 --sort hot

    # 分析单个帖子
    python main.py analyze --title "Hello" --content "..." --author someone

    # 查看规则
    python main.py rules

    # 发帖、投票、评论
    python main.py post --title "..." --content "..." --submolt general
    python main.py upvote <post_id>
    python main.py comment <post_id> --content "..."
"""

import argparse
import logging
import sys

from moltfilter.client import FEED_SORTS, VOTE_ACTIONS, MoltbookAPIError, MoltbookClient
from moltfilter.config import DEFAULT_CONFIG_PATH, get_config_value, load_config_with_defaults
from moltfilter.display import (
    format_analysis,
    format_comment,
    format_feed,
    format_post_created,
    format_profile,
    format_rules,
    use_color,
)
from moltfilter.fetchers import FeedFetcher
from moltfilter.filters import FeedFilter
from moltfilter.scoring import SpamScorer


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    配置日志系统
    Setup logging system

    日志输出到 stderr，stdout 只用于渲染结果。
    Logs go to stderr; stdout carries rendered output only.

    Args:
        verbose: 是否启用详细日志（DEBUG级别）
    """
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    # 降低第三方库的日志级别
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """
    构建命令行参数解析器
    Build the command line parser
    """
    parser = argparse.ArgumentParser(
        prog='moltbook-filter',
        description='Spam filter for Moltbook - filters noise, surfaces quality',
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f'Config file path (default: {DEFAULT_CONFIG_PATH}, optional)'
    )
    parser.add_argument(
        '--env',
        type=str,
        default=None,
        help='.env file path (default: auto-discover)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    # 需要访问 API 的子命令共享 --api-key
    api = argparse.ArgumentParser(add_help=False)
    api.add_argument(
        '--api-key', '-k',
        type=str,
        default=None,
        help='Moltbook API key (default: MOLTBOOK_API_KEY)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    feed = subparsers.add_parser('feed', parents=[api], help='Fetch and filter the Moltbook feed')
    feed.add_argument('--limit', '-l', type=int, default=None, help='Number of posts to fetch (default: 25)')
    feed.add_argument('--sort', '-s', choices=FEED_SORTS, default=None, help='Sort order (default: new)')
    feed.add_argument('--show-spam', action='store_true', default=None, help='Show spam posts too (for debugging)')
    feed.add_argument('--min-score', type=int, default=None, help='Minimum quality score to show, 0-100 (default: 30)')
    feed.add_argument('--personal', action='store_true', default=None, help='Use the personalized feed')

    analyze = subparsers.add_parser('analyze', help='Analyze a single post for spam')
    analyze.add_argument('--title', '-t', required=True, help='Post title')
    analyze.add_argument('--content', '-c', default='', help='Post content')
    analyze.add_argument('--author', '-a', default=None, help='Author name')

    subparsers.add_parser('rules', help='Show spam detection rules')

    post = subparsers.add_parser('post', parents=[api], help='Create a new post')
    post.add_argument('--title', '-t', required=True, help='Post title')
    post.add_argument('--content', '-c', required=True, help='Post content')
    post.add_argument('--submolt', '-m', default=None, help='Submolt to post in')

    for action in VOTE_ACTIONS:
        vote = subparsers.add_parser(action, parents=[api], help=f'{action.capitalize()} a post')
        vote.add_argument('post_id', help='Post ID')

    comment = subparsers.add_parser('comment', parents=[api], help='Comment on a post')
    comment.add_argument('post_id', help='Post ID')
    comment.add_argument('--content', '-c', required=True, help='Comment text')

    comments = subparsers.add_parser('comments', parents=[api], help='List and score comments on a post')
    comments.add_argument('post_id', help='Post ID')

    profile = subparsers.add_parser('profile', parents=[api], help='Show a profile (default: your own)')
    profile.add_argument('name', nargs='?', default=None, help='User name')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def make_client(config: dict, args: argparse.Namespace) -> MoltbookClient:
    """
    根据配置和命令行参数创建 API 客户端

    Raises:
        ValueError: 未配置 API 密钥
    """
    api_key = args.api_key or get_config_value(config, 'api.api_key', '')
    if not api_key:
        raise ValueError("Missing API key: pass --api-key or set MOLTBOOK_API_KEY")
    return MoltbookClient(
        api_key,
        base_url=get_config_value(config, 'api.base_url'),
        timeout=get_config_value(config, 'api.timeout', 30),
    )


def _pick(cli_value, config: dict, key_path: str):
    return cli_value if cli_value is not None else get_config_value(config, key_path)


def run_feed(config: dict, args: argparse.Namespace, client: MoltbookClient) -> int:
    """
    获取并过滤信息流
    Fetch and filter the feed

    Returns:
        退出码
    """
    fetcher = FeedFetcher(client, {
        'sort': _pick(args.sort, config, 'feed.sort'),
        'limit': _pick(args.limit, config, 'feed.limit'),
        'personalized': _pick(args.personal, config, 'feed.personalized'),
    })
    feed_filter = FeedFilter({
        'min_score': _pick(args.min_score, config, 'feed.min_score'),
        'show_spam': _pick(args.show_spam, config, 'feed.show_spam'),
        'max_workers': get_config_value(config, 'scoring.max_workers', 1),
    })

    color = use_color()
    print(f"🦞 Fetching {fetcher.source_name}...")
    result = fetcher.fetch()
    if not result.is_success():
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    print(format_feed(feed_filter.filter_posts(result.items), color=color))
    return 0


def run_analyze(args: argparse.Namespace) -> int:
    result = SpamScorer().score(args.title, args.content, args.author)
    print(format_analysis(args.title, result, color=use_color()))
    return 0


def run_rules() -> int:
    print(format_rules(color=use_color()))
    return 0


def run_write_command(args: argparse.Namespace, client: MoltbookClient) -> int:
    """
    执行写操作和单项查询命令
    Run write actions and single lookups

    Returns:
        退出码
    """
    color = use_color()

    if args.command == 'post':
        post = client.create_post(args.title, args.content, args.submolt)
        print(format_post_created(post, color=color))
    elif args.command in VOTE_ACTIONS:
        vote = {
            'upvote': client.upvote,
            'downvote': client.downvote,
            'unvote': client.unvote,
        }[args.command]
        vote(args.post_id)
        print(f"✓ {args.command} {args.post_id}")
    elif args.command == 'comment':
        comment = client.comment(args.post_id, args.content)
        print(f"✓ Commented {comment.id} on {args.post_id}")
    elif args.command == 'comments':
        scorer = SpamScorer()
        for comment in client.get_comments(args.post_id):
            print(format_comment(comment, scorer.score('', comment.content, comment.author), color=color))
    elif args.command == 'profile':
        profile = client.get_profile(args.name) if args.name else client.get_my_profile()
        print(format_profile(profile, color=color))

    return 0


def main(argv: list[str] | None = None) -> int:
    """
    主函数
    Main function

    Returns:
        退出码：0表示成功，1表示 API 或配置错误
        Exit code: 0 for success, 1 for API or config errors
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config_with_defaults(
            args.config,
            args.env,
            required=args.config != DEFAULT_CONFIG_PATH,
        )
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"Error: failed to load config: {e}", file=sys.stderr)
        return 1

    if args.command == 'analyze':
        return run_analyze(args)
    if args.command == 'rules':
        return run_rules()

    try:
        client = make_client(config, args)
        if args.command == 'feed':
            return run_feed(config, args, client)
        return run_write_command(args, client)
    except (MoltbookAPIError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
