"""
家谱树系统主入口
集成配置、构建器、导入器，提供加载与最近共同祖先查询接口
"""

import logging
from typing import Dict, Any, Iterable, Optional
from datetime import datetime
from pathlib import Path

from .exceptions import BaseError, TreeError
from .config.settings import SystemSettings
from .core.node import FamilyTree, PersonNode
from .core.builder import TreeBuilder
from .services.import_export import (
    LineImporter, TextLineImporter, TableLineImporter, tree_to_frame
)


class FamilyTreeSystem:
    """
    家谱树系统主类

    每次加载都构建一棵新树；加载失败时保留上一次成功加载的树。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        初始化系统

        Args:
            config: 系统配置字典
        """
        # 加载配置
        self.settings = SystemSettings.from_dict(config) if config else SystemSettings()

        # 初始化日志
        self._setup_logging()
        self.logger = logging.getLogger(__name__)

        self._tree: Optional[FamilyTree] = None
        self._last_stats: Dict[str, Any] = {}
        self._start_time = datetime.now()

        self.logger.debug(f"{self.settings.system_name} 初始化完成")

    def _setup_logging(self):
        """配置日志系统"""
        logging.basicConfig(
            level=getattr(logging, self.settings.log_level),
            format=self.settings.log_format,
            handlers=[logging.StreamHandler()]
        )

    # ========== 加载 ==========

    def _new_builder(self) -> TreeBuilder:
        tree = FamilyTree(lookup=self.settings.lookup_strategy)
        return TreeBuilder(tree, check_cycles=self.settings.check_cycles)

    def _publish(self, builder: TreeBuilder, stats: Dict[str, Any], source: str) -> Dict[str, Any]:
        tree = builder.build()
        self._tree = tree
        self._last_stats = stats
        self.logger.info(
            f"加载家谱成功: {source}, {stats['lines_processed']} 行, {tree.get_node_count()} 人"
        )
        return {
            "success": True,
            "source": source,
            "root": tree.root.name if tree.root else None,
            "node_count": tree.get_node_count(),
            "tree_depth": tree.get_tree_depth(),
            **stats
        }

    def _load_with(self, importer: LineImporter, source: Any, label: str) -> Dict[str, Any]:
        builder = self._new_builder()
        try:
            stats = importer.import_into(builder, source)
        except BaseError as e:
            self.logger.error(f"加载家谱失败: {label}, 错误: {e}")
            raise
        return self._publish(builder, stats, label)

    def load_lines(self, lines: Iterable[str]) -> Dict[str, Any]:
        """从已清理的行序列构建家谱"""
        builder = self._new_builder()
        try:
            stats = builder.add_lines(lines)
        except BaseError as e:
            self.logger.error(f"加载家谱失败: <lines>, 错误: {e}")
            raise
        return self._publish(builder, stats, "<lines>")

    def load_text(self, text: str) -> Dict[str, Any]:
        """从多行字符串构建家谱"""
        return self.load_lines(TextLineImporter.from_string(text))

    def load_file(self, file_path: str) -> Dict[str, Any]:
        """从文本文件构建家谱"""
        importer = TextLineImporter({'encoding': self.settings.encoding})
        return self._load_with(importer, file_path, str(file_path))

    def load_table(self, source: Any) -> Dict[str, Any]:
        """从CSV/Excel表格（或DataFrame）构建家谱"""
        importer = TableLineImporter({
            'parent_column': self.settings.parent_column,
            'children_column': self.settings.children_column,
        })
        label = str(source) if isinstance(source, (str, Path)) else "<table>"
        return self._load_with(importer, source, label)

    # ========== 查询 ==========

    @property
    def tree(self) -> Optional[FamilyTree]:
        return self._tree

    def _require_tree(self) -> FamilyTree:
        if self._tree is None:
            raise TreeError("尚未加载家谱", code="TREE_NOT_LOADED")
        return self._tree

    def most_recent_common_ancestor(self, name_a: str, name_b: str) -> Optional[PersonNode]:
        """查询两人的最近共同祖先，没有时返回None"""
        tree = self._require_tree()
        ancestor = tree.most_recent_common_ancestor(name_a, name_b)
        self.logger.debug(
            f"最近共同祖先: {name_a}, {name_b} -> {ancestor.name if ancestor else None}"
        )
        return ancestor

    def render(self) -> str:
        """渲染整棵家谱"""
        return str(self._require_tree())

    def to_frame(self):
        """家谱展开为 pandas DataFrame"""
        return tree_to_frame(self._require_tree())

    def get_system_info(self) -> Dict[str, Any]:
        """获取系统信息"""
        return {
            "system_name": self.settings.system_name,
            "version": self.settings.version,
            "uptime": str(datetime.now() - self._start_time),
            "loaded": self._tree is not None,
            "node_count": self._tree.get_node_count() if self._tree else 0,
            "last_load": dict(self._last_stats),
            "settings": self.settings.to_dict(),
        }

    def __repr__(self) -> str:
        return f"FamilyTreeSystem(name={self.settings.system_name}, tree={self._tree!r})"
