"""
核心模块包
包含家谱节点、家谱树与构建器实现
"""

# 导入节点模块
from .node import PersonNode, FamilyTree

# 导入构建器
from .builder import TreeBuilder

__all__ = [
    'PersonNode',
    'FamilyTree',
    'TreeBuilder',
]
