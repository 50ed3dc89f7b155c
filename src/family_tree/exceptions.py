"""
家谱树系统异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """数据验证错误"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code="VALIDATION_ERROR", details=details, **kwargs)


# ==================== 树结构相关异常 ====================
class TreeError(BaseError):
    """树结构错误基类"""
    pass


class MalformedLineError(TreeError):
    """输入行缺少冒号分隔符"""
    def __init__(self, line: str, **kwargs):
        super().__init__(
            message=f"格式错误的行(缺少冒号): {line}",
            code="MALFORMED_LINE",
            details={"line": line},
            **kwargs
        )


class ParentNotFoundError(TreeError):
    """父节点尚未出现在树中"""
    def __init__(self, parent_name: str, **kwargs):
        super().__init__(
            message=f"树中找不到父节点: {parent_name}",
            code="PARENT_NOT_FOUND",
            details={"parent_name": parent_name},
            **kwargs
        )


class CycleDetectedError(TreeError):
    """挂接子节点会形成环"""
    def __init__(self, parent_name: str, child_name: str, **kwargs):
        super().__init__(
            message=f"挂接会形成环: {child_name} 是 {parent_name} 自身或其祖先",
            code="CYCLE_DETECTED",
            details={"parent_name": parent_name, "child_name": child_name},
            **kwargs
        )


class PersonNotFoundError(TreeError):
    """查询的人不存在"""
    def __init__(self, name: str, **kwargs):
        super().__init__(
            message=f"查无此人: {name}",
            code="PERSON_NOT_FOUND",
            details={"name": name},
            **kwargs
        )


# ==================== 导入相关异常 ====================
class DataImportError(BaseError):
    """导入过程异常"""
    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", None) or {}
        if source is not None:
            details["source"] = source
        super().__init__(message, code="IMPORT_ERROR", details=details, **kwargs)
