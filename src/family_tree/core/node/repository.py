"""
家谱树模块
管理家谱节点的存储、查询、遍历以及最近共同祖先计算
"""

from typing import Optional, Dict, Any, List, Iterator

from .entity import PersonNode
from ...exceptions import TreeError, PersonNotFoundError, ValidationError

LOOKUP_STRATEGIES = ("index", "scan")


class FamilyTree:
    """
    家谱树，持有所有节点

    节点按名称登记在索引中（树内名称唯一）。根节点只能设置一次。
    树结构只增不减：节点创建后不会被删除。
    """

    def __init__(self, lookup: str = "index"):
        """
        初始化家谱树

        Args:
            lookup: 名称查找方式，"index" 使用名称索引，
                    "scan" 从根节点做前序深度优先扫描
        """
        if lookup not in LOOKUP_STRATEGIES:
            raise ValueError(f"不支持的查找方式: {lookup}")

        self._root: Optional[PersonNode] = None
        self._nodes: Dict[str, PersonNode] = {}
        self._lookup = lookup

    @property
    def root(self) -> Optional[PersonNode]:
        """获取根节点"""
        return self._root

    @property
    def lookup(self) -> str:
        return self._lookup

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def set_root(self, root_node: PersonNode) -> None:
        """设置根节点"""
        if self._root is not None:
            raise TreeError(f"根节点已设置: {self._root.name}", code="ROOT_ALREADY_SET")

        self._root = root_node
        self._nodes[root_node.name] = root_node

    # ========== 查找 ==========

    def find_by_name(self, name: str) -> Optional[PersonNode]:
        """根据名称查找节点，找不到返回None"""
        if self._root is None:
            return None
        if self._lookup == "index":
            return self._nodes.get(name)
        return self._scan_for(name)

    def _scan_for(self, name: str) -> Optional[PersonNode]:
        """从根节点前序扫描，返回第一个名称匹配的节点"""
        for node in self._iter_preorder():
            if node.name == name:
                return node
        return None

    def __contains__(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    # ========== 结构修改 ==========

    def attach_child(self, parent_node: PersonNode, child_node: PersonNode) -> None:
        """
        挂接子节点

        前置条件：child_node 不是 parent_node 自身或其祖先。
        这里不做环检查，由调用方（TreeBuilder）负责。
        """
        if self._nodes.get(parent_node.name) is not parent_node:
            raise TreeError(f"父节点不在树中: {parent_node.name}", code="PARENT_NOT_IN_TREE")

        registered = self._nodes.get(child_node.name)
        if registered is not None and registered is not child_node:
            raise ValidationError(
                message=f"名称已被其他节点占用: {child_node.name}",
                field="name",
                value=child_node.name,
                reason="duplicate_name"
            )

        child_node.parent = parent_node
        parent_node.children.append(child_node)
        self._nodes[child_node.name] = child_node

    # ========== 祖先查询 ==========

    def ancestor_chain(self, node: PersonNode) -> List[PersonNode]:
        """祖先链：从直接父节点到根节点，不含节点自身"""
        return node.ancestors()

    def most_recent_common_ancestor(self, name_a: str, name_b: str) -> Optional[PersonNode]:
        """
        计算两个人的最近共同祖先

        祖先链均不含本人，因此同一个人查询自身时返回其直接父节点。

        Args:
            name_a: 第一个人的名称
            name_b: 第二个人的名称

        Returns:
            最近共同祖先节点，没有共同祖先时返回None

        Raises:
            PersonNotFoundError: 任一名称不在树中
        """
        node_a = self.find_by_name(name_a)
        if node_a is None:
            raise PersonNotFoundError(name_a)

        node_b = self.find_by_name(name_b)
        if node_b is None:
            raise PersonNotFoundError(name_b)

        ancestors_of_a = self.ancestor_chain(node_a)
        ancestors_of_b = {id(n) for n in self.ancestor_chain(node_b)}

        for candidate in ancestors_of_a:
            if id(candidate) in ancestors_of_b:
                return candidate

        return None

    # ========== 统计与遍历 ==========

    def get_node_count(self) -> int:
        """获取节点数量"""
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def get_all_nodes(self) -> List[PersonNode]:
        """按前序获取所有节点"""
        return list(self._iter_preorder())

    def get_tree_depth(self) -> int:
        """获取树的最大深度（只有根节点时为0）"""
        max_depth = 0
        for _, depth in self._iter_with_depth():
            max_depth = max(max_depth, depth)
        return max_depth

    def traverse(self, order: str = "preorder") -> List[PersonNode]:
        """
        遍历树

        Args:
            order: 遍历顺序，可选 "preorder"（前序）, "postorder"（后序）

        Returns:
            节点列表
        """
        if order == "preorder":
            return list(self._iter_preorder())
        if order == "postorder":
            if self._root is None:
                return []
            result = []
            stack = [self._root]
            while stack:
                node = stack.pop()
                result.append(node)
                stack.extend(node.children)
            result.reverse()
            return result
        raise ValueError(f"不支持的遍历顺序: {order}")

    def _iter_preorder(self) -> Iterator[PersonNode]:
        for node, _ in self._iter_with_depth():
            yield node

    def _iter_with_depth(self) -> Iterator[tuple]:
        """前序遍历，子节点按插入顺序，显式栈避免递归深度限制"""
        if self._root is None:
            return
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in reversed(node.children):
                stack.append((child, depth + 1))

    # ========== 展示 ==========

    def render(self) -> str:
        """前序渲染，每层缩进两个空格，每个名字占一行"""
        return "".join(
            f"{'  ' * depth}{node.name}\n" for node, depth in self._iter_with_depth()
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为嵌套字典（仅用于展示）"""
        return {
            'root': self._root.to_dict() if self._root else None,
            'node_count': self.get_node_count(),
            'tree_depth': self.get_tree_depth(),
        }

    def __str__(self) -> str:
        return "Family Tree:\n\n" + self.render()

    def __repr__(self) -> str:
        root_name = self._root.name if self._root else None
        return f"FamilyTree(root={root_name}, nodes={len(self._nodes)}, lookup={self._lookup})"
