"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

HOBBIT_LINES = [
    "Mungo:Bungo,Belba",
    "Bungo:Bilbo",
    "Belba:Frodo",
]


@pytest.fixture
def hobbit_lines():
    return list(HOBBIT_LINES)


@pytest.fixture
def hobbit_tree(hobbit_lines):
    from family_tree.core.builder import TreeBuilder

    builder = TreeBuilder()
    builder.add_lines(hobbit_lines)
    return builder.build()
