"""
Moltbook 垃圾内容过滤器
Moltbook spam filter: filters noise, surfaces quality.
"""

__version__ = "0.1.0"
