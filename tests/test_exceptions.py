"""
测试异常体系
"""
from family_tree.exceptions import (
    BaseError, TreeError, MalformedLineError, ParentNotFoundError,
    PersonNotFoundError, CycleDetectedError, DataImportError, ConfigError
)


def test_exception_creation():
    """测试异常创建"""
    error = MalformedLineError("NoColonHere")

    assert error.code == "MALFORMED_LINE"
    assert "NoColonHere" in str(error)
    assert str(error).startswith("[MALFORMED_LINE]")
    assert error.details["line"] == "NoColonHere"


def test_exception_inheritance():
    """测试异常继承关系"""
    for error in (
        MalformedLineError("x"),
        ParentNotFoundError("Z"),
        PersonNotFoundError("Gandalf"),
        CycleDetectedError("A", "B"),
    ):
        assert isinstance(error, TreeError)
        assert isinstance(error, BaseError)

    assert not issubclass(DataImportError, TreeError)
    assert issubclass(ConfigError, BaseError)


def test_exception_to_dict():
    """测试转换为字典"""
    data = PersonNotFoundError("Gandalf").to_dict()

    assert data["code"] == "PERSON_NOT_FOUND"
    assert data["details"] == {"name": "Gandalf"}
    assert "timestamp" in data


def test_import_error_details():
    error = DataImportError("读取失败", source="missing.txt", details={"row": 3})
    assert error.code == "IMPORT_ERROR"
    assert error.details == {"row": 3, "source": "missing.txt"}
