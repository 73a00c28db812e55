"""
配置加载模块
Config Loading Module

实现YAML配置文件加载、.env 加载和环境变量替换功能。
Implements YAML config file loading, .env loading and environment variable substitution.

API 密钥等敏感配置通过环境变量提供（默认读取 MOLTBOOK_API_KEY）。
Sensitive settings such as the API key come from environment variables
(MOLTBOOK_API_KEY by default).
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv


DEFAULT_CONFIG_PATH = "config.yaml"


def load_env_file(env_path: str | None = None) -> bool:
    """
    加载.env文件中的环境变量。
    Load environment variables from .env file.

    Args:
        env_path: .env文件路径，默认为None（自动查找）
                  Path to .env file, defaults to None (auto-discover)

    Returns:
        是否成功加载了.env文件
        Whether .env file was successfully loaded
    """
    if env_path:
        env_file = Path(env_path)
        if env_file.exists():
            load_dotenv(env_file)
            return True
        return False

    return load_dotenv()


def replace_env_vars(value: Any) -> Any:
    """
    递归替换配置值中的环境变量占位符。
    Recursively substitute environment variable placeholders in config values.

    支持 ${VAR_NAME} 和 ${VAR_NAME:default} 格式。
    Supports ${VAR_NAME} and ${VAR_NAME:default}.

    Examples:
        >>> os.environ['TEST_VAR'] = 'test_value'
        >>> replace_env_vars('${TEST_VAR}')
        'test_value'
        >>> replace_env_vars({'key': '${TEST_VAR}'})
        {'key': 'test_value'}
        >>> replace_env_vars('${NONEXISTENT_VAR:fallback}')
        'fallback'
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replacer(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ''
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replacer, value)

    elif isinstance(value, dict):
        return {k: replace_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [replace_env_vars(item) for item in value]

    return value


def load_config(config_path: str = DEFAULT_CONFIG_PATH, env_path: str | None = None) -> dict:
    """
    加载YAML配置文件并替换环境变量。
    Load YAML config file and substitute environment variables.

    Args:
        config_path: 配置文件路径
        env_path: .env文件路径，默认为None（自动查找）

    Returns:
        解析并替换环境变量后的配置字典

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML解析错误
    """
    load_env_file(env_path)

    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return replace_env_vars(config)


def get_config_value(config: dict, key_path: str, default: Any = None) -> Any:
    """
    通过点分隔的路径获取配置值。
    Get config value by dot-separated path.

    Examples:
        >>> config = {'api': {'timeout': 30}}
        >>> get_config_value(config, 'api.timeout')
        30
        >>> get_config_value(config, 'api.missing', 'default')
        'default'
    """
    keys = key_path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


# 默认配置值
# Default Configuration Values
DEFAULT_CONFIG: dict[str, Any] = {
    'api': {
        'base_url': 'https://www.moltbook.com/api/v1',
        'api_key': '${MOLTBOOK_API_KEY}',
        'timeout': 30,
    },
    'feed': {
        'limit': 25,
        'sort': 'new',
        'min_score': 30,
        'show_spam': False,
        'personalized': False,
    },
    'scoring': {
        'max_workers': 4,
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """
    深度合并两个字典，override中的值覆盖base中的值。
    Deep merge two dictionaries, values in override take precedence over base.

    Examples:
        >>> _deep_merge({'a': {'b': 1, 'c': 2}}, {'a': {'b': 10}})
        {'a': {'b': 10, 'c': 2}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_defaults(config: dict) -> dict:
    """
    将默认配置应用到用户配置中，缺失的配置项使用默认值。
    Apply default configuration to user config, missing items use defaults.

    默认值中的环境变量占位符也会被替换。
    Placeholders inside the defaults are substituted as well.

    Examples:
        >>> result = apply_defaults({'feed': {'limit': 50}})
        >>> result['feed']['limit'], result['feed']['sort']
        (50, 'new')
    """
    return replace_env_vars(_deep_merge(DEFAULT_CONFIG, config))


def load_config_with_defaults(
    config_path: str | None = DEFAULT_CONFIG_PATH,
    env_path: str | None = None,
    required: bool = False,
) -> dict:
    """
    加载配置文件并应用默认值。
    Load configuration file and apply defaults.

    配置文件不存在且 required 为 False 时，只使用默认值和环境变量。
    When the file is missing and required is False, only defaults and
    environment variables are used.

    Args:
        config_path: 配置文件路径
        env_path: .env文件路径
        required: 配置文件是否必须存在

    Returns:
        完整的配置字典，包含所有默认值

    Raises:
        FileNotFoundError: required 为 True 且配置文件不存在
    """
    if config_path and (required or Path(config_path).exists()):
        config = load_config(config_path, env_path)
    else:
        load_env_file(env_path)
        config = {}
    return apply_defaults(config)
