"""
家谱节点实体模块
每个节点代表家谱中的一个人
"""

from typing import Optional, Dict, Any, List


class PersonNode:
    """
    家谱节点 - 代表一个人

    每个节点包含：
    1. 身份信息：name（区分大小写，树内唯一）
    2. 树关系：parent（非拥有的反向引用）, children（按文件顺序）
    """

    def __init__(self, name: str):
        self.name = name

        # ========== 树结构关系 ==========
        self.parent: Optional['PersonNode'] = None
        self.children: List['PersonNode'] = []

    # ========== 树结构查询 ==========

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        """到根节点的跳数（根为0）"""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def ancestors(self) -> List['PersonNode']:
        """获取所有祖先节点（从父节点到根，不含自身）"""
        ancestors = []
        current = self.parent
        while current is not None:
            ancestors.append(current)
            current = current.parent
        return ancestors

    def is_ancestor_of(self, other: 'PersonNode') -> bool:
        """判断自身是否为other的祖先"""
        current = other.parent
        while current is not None:
            if current is self:
                return True
            current = current.parent
        return False

    def get_path(self) -> List[str]:
        """获取从根到当前节点的路径名称"""
        path = [self.name]
        current = self.parent
        while current is not None:
            path.insert(0, current.name)
            current = current.parent
        return path

    # ========== 序列化 ==========

    def to_dict(self, include_children: bool = True) -> Dict[str, Any]:
        """
        转换为字典（仅用于展示）

        Args:
            include_children: 是否递归包含子节点
        """
        result = {
            'name': self.name,
            'parent': self.parent.name if self.parent else None,
        }
        if include_children:
            result['children'] = [child.to_dict() for child in self.children]
        return result

    # ========== 特殊方法 ==========

    def __repr__(self) -> str:
        return f"PersonNode({self.name}, children={len(self.children)})"
