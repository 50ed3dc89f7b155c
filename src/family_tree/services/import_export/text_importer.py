"""
文本行导入器
从文件、字符串或文本流读取家谱行
"""
import io
from pathlib import Path
from typing import Dict, Any, Iterator, Union, TextIO

from .base_importer import LineImporter
from ...exceptions import DataImportError

TextSource = Union[str, Path, TextIO]


class TextLineImporter(LineImporter):
    """
    文本行导入器

    支持：
    1. 文件路径（str 或 Path），按配置的编码读取
    2. 已打开的文本流
    每行去除首尾空白，空行跳过。
    """

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.encoding = self.config.get('encoding', 'utf-8')

    def validate_source(self, source: TextSource) -> bool:
        if isinstance(source, (str, Path)):
            return Path(source).is_file()
        return hasattr(source, 'read')

    def iter_lines(self, source: TextSource) -> Iterator[str]:
        if isinstance(source, (str, Path)):
            yield from self._iter_file(Path(source))
        else:
            yield from self._iter_stream(source)

    def _iter_file(self, path: Path) -> Iterator[str]:
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                # 读完再产出，读取错误不会夹在构建过程中
                raw_lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise DataImportError(f"读取文件失败: {path} ({e})", source=str(path)) from e

        yield from self._clean(raw_lines)

    def _iter_stream(self, stream: TextIO) -> Iterator[str]:
        try:
            raw_lines = stream.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise DataImportError(f"读取文本流失败: {e}", source=repr(stream)) from e

        yield from self._clean(raw_lines)

    @staticmethod
    def _clean(raw_lines) -> Iterator[str]:
        for raw in raw_lines:
            line = raw.strip()
            if line:
                yield line

    @classmethod
    def from_string(cls, text: str) -> Iterator[str]:
        """从字符串产出清理后的行"""
        return cls().iter_lines(io.StringIO(text))
