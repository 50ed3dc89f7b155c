"""
行数据源基类
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, Iterator

from ...core.builder import TreeBuilder
from ...exceptions import DataImportError

logger = logging.getLogger(__name__)


class LineImporter(ABC):
    """
    行数据源抽象基类

    产出去除首尾空白的非空行，交给 TreeBuilder 逐行应用。
    读取失败以 DataImportError 报告给调用方，不经过构建器。
    """

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self._validate_config()

    def _validate_config(self):
        """验证配置参数"""
        pass

    @abstractmethod
    def validate_source(self, source: Any) -> bool:
        """验证数据源是否可导入"""
        pass

    @abstractmethod
    def iter_lines(self, source: Any) -> Iterator[str]:
        """逐行产出 "父:子1,子2" 格式的文本"""
        pass

    def import_into(self, builder: TreeBuilder, source: Any) -> Dict[str, Any]:
        """
        导入的完整流程
        1. 验证数据源
        2. 逐行应用到构建器

        Returns:
            构建器统计信息
        """
        if not self.validate_source(source):
            raise DataImportError(f"数据源验证失败: {source}", source=str(source))

        stats = builder.add_lines(self.iter_lines(source))
        logger.debug(f"导入完成: {source}, 共 {stats['lines_processed']} 行")
        return stats
