"""
节点模块 - 家谱树结构和节点管理
"""

from .entity import PersonNode
from .repository import FamilyTree

__all__ = ['PersonNode', 'FamilyTree']
