"""
导入导出模块
"""

from .base_importer import LineImporter
from .text_importer import TextLineImporter
from .table_importer import TableLineImporter, tree_to_frame

__all__ = [
    'LineImporter',
    'TextLineImporter',
    'TableLineImporter',
    'tree_to_frame',
]
