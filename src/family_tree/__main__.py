"""
命令行入口：加载家谱文件，打印家谱并查询最近共同祖先
"""
import sys
import argparse

from .system import FamilyTreeSystem
from .exceptions import DataImportError, TreeError, ValidationError


def main(argv=None) -> int:
    # 创建命令行参数解析器
    parser = argparse.ArgumentParser(prog='family_tree', description='构建家谱并查询最近共同祖先')
    parser.add_argument('file', help='家谱文件路径（每行 父:子1,子2）')
    parser.add_argument('person_a', nargs='?', default='Bilbo', help='第一个人（默认 Bilbo）')
    parser.add_argument('person_b', nargs='?', default='Frodo', help='第二个人（默认 Frodo）')
    parser.add_argument('--table', action='store_true', help='按CSV/Excel表格读取')
    parser.add_argument('--log-level', default='WARNING', type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], help='日志级别')

    args = parser.parse_args(argv)

    system = FamilyTreeSystem({"log_level": args.log_level})

    try:
        if args.table:
            system.load_table(args.file)
        else:
            system.load_file(args.file)

        print("Tree:\n" + system.render() + "\n**************\n")

        ancestor = system.most_recent_common_ancestor(args.person_a, args.person_b)
    except DataImportError as x:
        print(f"IO trouble: {x.message}")
        return 1
    except (TreeError, ValidationError) as x:
        print(f"Input file trouble: {x.message}")
        return 1

    if ancestor is None:
        print(f"{args.person_a} and {args.person_b} have no common ancestor")
    else:
        print(f"Most recent common ancestor of {args.person_a} and {args.person_b} is {ancestor.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
