"""
家谱树系统基本使用示例
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from family_tree import FamilyTreeSystem
from family_tree.exceptions import PersonNotFoundError

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def main():
    """主函数"""
    print("=" * 60)
    print("家谱树系统 - 基本使用示例")
    print("=" * 60)

    # 1. 创建系统实例
    print("\n1. 初始化系统...")
    system = FamilyTreeSystem({"log_level": "INFO"})

    # 2. 加载家谱
    print("\n2. 加载家谱文件...")
    result = system.load_file(os.path.join(DATA_DIR, 'baggins_branch.txt'))
    print(f"   根节点: {result['root']}")
    print(f"   人数: {result['node_count']}")
    print(f"   深度: {result['tree_depth']}")

    # 3. 打印家谱
    print("\n3. 家谱结构:")
    print(system.render())

    # 4. 查询最近共同祖先
    print("4. 最近共同祖先:")
    for a, b in [("Bilbo", "Frodo"), ("Drogo", "Dudo"), ("Bilbo", "Bilbo"), ("Bilbo", "Gandalf")]:
        try:
            ancestor = system.most_recent_common_ancestor(a, b)
        except PersonNotFoundError as e:
            print(f"   {a} / {b}: {e.message}")
            continue
        print(f"   {a} / {b}: {ancestor.name if ancestor else '无共同祖先'}")

    # 5. 表格视图
    print("\n5. 表格视图:")
    print(system.to_frame().to_string(index=False))


if __name__ == "__main__":
    main()
