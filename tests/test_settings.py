"""
测试系统配置
"""
import pytest

from family_tree.config.settings import SystemSettings
from family_tree.exceptions import ConfigError


def test_defaults():
    settings = SystemSettings()
    assert settings.system_name == "家谱树系统"
    assert settings.lookup_strategy == "index"
    assert settings.check_cycles is True
    assert settings.encoding == "utf-8"


def test_from_dict_ignores_unknown_keys():
    settings = SystemSettings.from_dict({"log_level": "debug", "unknown": 1})
    assert settings.log_level == "DEBUG"
    assert "unknown" not in settings.to_dict()


@pytest.mark.parametrize("config, key", [
    ({"log_level": "LOUD"}, "log_level"),
    ({"lookup_strategy": "hash"}, "lookup_strategy"),
    ({"encoding": ""}, "encoding"),
    ({"children_column": ""}, "parent_column"),
])
def test_invalid_settings(config, key):
    with pytest.raises(ConfigError) as exc_info:
        SystemSettings.from_dict(config)
    assert exc_info.value.details["config_key"] == key
