"""
系统配置设置
"""
from typing import Dict, Any
from dataclasses import dataclass, asdict

from ..exceptions import ConfigError


@dataclass
class SystemSettings:
    """
    系统配置类
    使用dataclass确保配置的类型安全
    """

    # 系统基本配置
    system_name: str = "家谱树系统"
    version: str = "1.0.0"

    # 日志配置
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 输入配置
    encoding: str = "utf-8"

    # 树结构配置
    lookup_strategy: str = "index"  # index, scan
    check_cycles: bool = True

    # 表格导入配置
    parent_column: str = "parent"
    children_column: str = "children"

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()

    def _validate_settings(self):
        """验证配置值"""
        # 验证日志级别
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level"
            )
        self.log_level = self.log_level.upper()

        # 验证查找方式
        valid_strategies = ["index", "scan"]
        if self.lookup_strategy not in valid_strategies:
            raise ConfigError(
                message=f"无效的查找方式: {self.lookup_strategy}，必须是 {valid_strategies} 之一",
                config_key="lookup_strategy"
            )

        if not self.encoding:
            raise ConfigError(message="编码不能为空", config_key="encoding")

        if not self.parent_column or not self.children_column:
            raise ConfigError(message="表格列名不能为空", config_key="parent_column")

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SystemSettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)
