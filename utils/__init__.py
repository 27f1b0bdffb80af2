"""工具模块"""
from .formatting import format_rational

__all__ = ['format_rational']
