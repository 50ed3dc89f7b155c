"""
表格导入器 - 从CSV/Excel读取家谱

表格每行一条记录：父名称列 + 子名称列（逗号分隔），
转换为与文本输入相同的 "父:子1,子2" 行。
"""
from pathlib import Path
from typing import Iterator, Union

import pandas as pd

from .base_importer import LineImporter
from ...core.node import FamilyTree
from ...exceptions import DataImportError, ConfigError

TableSource = Union[str, Path, pd.DataFrame]

EXCEL_SUFFIXES = ('.xlsx', '.xls')


class TableLineImporter(LineImporter):
    """表格行导入器（pandas）"""

    def _validate_config(self):
        """验证列名配置"""
        self.parent_column = self.config.get('parent_column', 'parent')
        self.children_column = self.config.get('children_column', 'children')
        self.sheet_name = self.config.get('sheet_name', 0)

        for key, column in (('parent_column', self.parent_column), ('children_column', self.children_column)):
            if not column:
                raise ConfigError(message=f"表格列名不能为空: {key}", config_key=key)
        if self.parent_column == self.children_column:
            raise ConfigError(message="父列与子列不能相同", config_key='children_column')

    def validate_source(self, source: TableSource) -> bool:
        if isinstance(source, pd.DataFrame):
            return True
        path = Path(source)
        return path.is_file() and (path.suffix.lower() == '.csv' or path.suffix.lower() in EXCEL_SUFFIXES)

    def read_frame(self, source: TableSource) -> pd.DataFrame:
        """读取表格为DataFrame，所有单元格按字符串读取"""
        if isinstance(source, pd.DataFrame):
            df = source
        else:
            path = Path(source)
            try:
                if path.suffix.lower() in EXCEL_SUFFIXES:
                    df = pd.read_excel(path, sheet_name=self.sheet_name, dtype=str)
                else:
                    df = pd.read_csv(path, dtype=str, skipinitialspace=True)
            except (OSError, ValueError) as e:
                raise DataImportError(f"读取表格失败: {path} ({e})", source=str(path)) from e

        missing = [c for c in (self.parent_column, self.children_column) if c not in df.columns]
        if missing:
            raise DataImportError(
                f"表格缺少列: {missing}",
                source=str(source) if not isinstance(source, pd.DataFrame) else "DataFrame",
                details={"missing_columns": missing}
            )
        return df

    def iter_lines(self, source: TableSource) -> Iterator[str]:
        df = self.read_frame(source)

        for idx, row in df.iterrows():
            raw_parent = row[self.parent_column]
            parent = str(raw_parent).strip() if pd.notna(raw_parent) else ''
            if not parent:
                continue
            if ':' in parent:
                raise DataImportError(
                    f"父名称不能包含冒号: {parent}",
                    details={"row": idx}
                )

            raw_children = row[self.children_column]
            children = str(raw_children).strip() if pd.notna(raw_children) else ''
            yield f"{parent}:{children}"


def tree_to_frame(tree: FamilyTree) -> pd.DataFrame:
    """
    将家谱树展开为表格，按前序每人一行

    列：name, parent, depth, child_count
    """
    rows = [
        {
            'name': node.name,
            'parent': node.parent.name if node.parent else None,
            'depth': node.depth,
            'child_count': len(node.children),
        }
        for node in tree.traverse("preorder")
    ]
    return pd.DataFrame(rows, columns=['name', 'parent', 'depth', 'child_count'])
