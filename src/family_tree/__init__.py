"""
家谱树系统 - 构建家谱并查询最近共同祖先
"""

__version__ = "1.0.0"

from .system import FamilyTreeSystem

__all__ = ['FamilyTreeSystem']
