"""
家谱树构建器
逐行解析 "父:子1,子2,..." 格式的输入并扩展家谱树
"""
from typing import Dict, Any, Iterable, List, Optional

from .node import PersonNode, FamilyTree
from ..exceptions import (
    BaseError, MalformedLineError, ParentNotFoundError,
    CycleDetectedError, ValidationError
)


class TreeBuilder:
    """家谱树构建器，负责把输入行应用到树上"""

    def __init__(self, tree: Optional[FamilyTree] = None, check_cycles: bool = True):
        """
        初始化构建器

        Args:
            tree: 要扩展的家谱树，为None时创建一棵空树
            check_cycles: 是否在挂接前检查环
        """
        self.tree = tree if tree is not None else FamilyTree()
        self.check_cycles = check_cycles

        # 统计信息
        self.stats = {
            'lines_processed': 0,
            'people_created': 0,
        }

    def add_line(self, line: str) -> None:
        """
        应用一行输入

        第一行的父名称成为根节点；之后每行的父名称必须已在树中。
        子名称逐个去除空白，空项忽略。校验全部通过后才修改树。

        Raises:
            MalformedLineError: 缺少冒号
            ParentNotFoundError: 父节点不在非空树中
            CycleDetectedError: 子节点是父节点自身或其祖先
            ValidationError: 子节点已有其他父节点
        """
        colon_index = line.find(':')
        if colon_index < 0:
            raise MalformedLineError(line)

        parent_name = line[:colon_index]
        children_string = line[colon_index + 1:]
        child_names = [kid.strip() for kid in children_string.split(',')] if children_string else []

        new_root = None
        if self.tree.is_empty:
            new_root = PersonNode(parent_name)
            parent_node = new_root
        else:
            parent_node = self.tree.find_by_name(parent_name)
            if parent_node is None:
                raise ParentNotFoundError(parent_name)

        # 先解析并校验全部子节点
        pending: Dict[str, PersonNode] = {parent_node.name: parent_node}
        to_attach: List[PersonNode] = []
        created = 0
        for child_name in child_names:
            if not child_name:
                continue

            child = pending.get(child_name) or self.tree.find_by_name(child_name)
            if child is None:
                child = PersonNode(child_name)
                pending[child_name] = child
                created += 1
            elif child in to_attach:
                continue

            if self.check_cycles and (child is parent_node or child.is_ancestor_of(parent_node)):
                raise CycleDetectedError(parent_node.name, child.name)

            # 同一父节点重复列出的子节点不再追加
            if child.parent is parent_node:
                continue
            if child.parent is not None:
                raise ValidationError(
                    message=f"此人已有父节点: {child.name} (父节点 {child.parent.name})",
                    field="parent",
                    value=parent_node.name,
                    reason="already_has_parent"
                )

            to_attach.append(child)

        # 校验通过，修改树
        if new_root is not None:
            self.tree.set_root(new_root)
            created += 1
        for child in to_attach:
            self.tree.attach_child(parent_node, child)

        self.stats['lines_processed'] += 1
        self.stats['people_created'] += created

    def add_lines(self, lines: Iterable[str]) -> Dict[str, Any]:
        """
        按顺序应用多行输入，遇到第一个错误即停止

        之前各行创建的节点保留在树中，不回滚。
        出错行号（从1开始）记录在异常的 details["line_number"] 中。

        Returns:
            统计信息
        """
        for line_number, line in enumerate(lines, start=1):
            try:
                self.add_line(line)
            except BaseError as e:
                e.details["line_number"] = line_number
                raise
        return dict(self.stats)

    def build(self) -> FamilyTree:
        """返回构建中的树"""
        return self.tree
