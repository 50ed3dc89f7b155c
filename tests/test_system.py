"""
测试系统主类与命令行入口
"""
import pandas as pd
import pytest

from family_tree import FamilyTreeSystem
from family_tree.__main__ import main
from family_tree.exceptions import (
    TreeError, MalformedLineError, PersonNotFoundError, DataImportError
)

HOBBITS = "Mungo:Bungo,Belba\nBungo:Bilbo\nBelba:Frodo\n"


class TestFamilyTreeSystem:
    """测试 FamilyTreeSystem"""

    @pytest.fixture
    def system(self):
        return FamilyTreeSystem({"log_level": "DEBUG"})

    @pytest.fixture
    def tree_file(self, tmp_path):
        path = tmp_path / "hobbits.txt"
        path.write_text(HOBBITS, encoding="utf-8")
        return path

    def test_query_before_load(self, system):
        assert system.tree is None
        with pytest.raises(TreeError) as exc_info:
            system.most_recent_common_ancestor("Bilbo", "Frodo")
        assert exc_info.value.code == "TREE_NOT_LOADED"

    def test_load_file(self, system, tree_file):
        result = system.load_file(str(tree_file))

        assert result["success"] is True
        assert result["root"] == "Mungo"
        assert result["node_count"] == 5
        assert result["tree_depth"] == 2
        assert result["lines_processed"] == 3
        assert system.most_recent_common_ancestor("Bilbo", "Frodo").name == "Mungo"

    def test_load_text(self, system):
        system.load_text(HOBBITS)
        assert system.most_recent_common_ancestor("Bilbo", "Bilbo").name == "Bungo"

    def test_load_lines(self, system, hobbit_lines):
        system.load_lines(hobbit_lines)
        assert system.render().startswith("Family Tree:\n\nMungo\n  Bungo\n")

    def test_load_table(self, system):
        frame = pd.DataFrame({
            "parent": ["Mungo", "Bungo", "Belba"],
            "children": ["Bungo,Belba", "Bilbo", "Frodo"],
        })
        system.load_table(frame)
        assert system.most_recent_common_ancestor("Bilbo", "Frodo").name == "Mungo"

    def test_failed_load_keeps_previous_tree(self, system):
        system.load_text(HOBBITS)
        previous = system.tree

        with pytest.raises(MalformedLineError):
            system.load_text("A:B\nNoColonHere\n")

        assert system.tree is previous

    def test_missing_file(self, system, tmp_path):
        with pytest.raises(DataImportError):
            system.load_file(str(tmp_path / "missing.txt"))
        assert system.tree is None

    def test_person_not_found(self, system):
        system.load_text(HOBBITS)
        with pytest.raises(PersonNotFoundError):
            system.most_recent_common_ancestor("Bilbo", "Gandalf")

    def test_scan_lookup_setting(self):
        system = FamilyTreeSystem({"lookup_strategy": "scan"})
        system.load_text(HOBBITS)
        assert system.tree.lookup == "scan"
        assert system.most_recent_common_ancestor("Bilbo", "Frodo").name == "Mungo"

    def test_to_frame(self, system):
        system.load_text(HOBBITS)
        assert system.to_frame()['name'].tolist()[0] == "Mungo"

    def test_system_info(self, system):
        system.load_text(HOBBITS)
        info = system.get_system_info()

        assert info["loaded"] is True
        assert info["node_count"] == 5
        assert info["last_load"]["people_created"] == 5
        assert info["settings"]["log_level"] == "DEBUG"


class TestCommandLine:
    """测试命令行入口"""

    def test_default_query(self, tmp_path, capsys):
        path = tmp_path / "hobbits.txt"
        path.write_text(HOBBITS, encoding="utf-8")

        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "Tree:\nFamily Tree:\n\nMungo\n" in out
        assert "Most recent common ancestor of Bilbo and Frodo is Mungo" in out

    def test_explicit_names(self, tmp_path, capsys):
        path = tmp_path / "hobbits.txt"
        path.write_text(HOBBITS, encoding="utf-8")

        assert main([str(path), "Bungo", "Belba"]) == 0
        assert "of Bungo and Belba is Mungo" in capsys.readouterr().out

    def test_no_common_ancestor(self, tmp_path, capsys):
        path = tmp_path / "hobbits.txt"
        path.write_text(HOBBITS, encoding="utf-8")

        assert main([str(path), "Mungo", "Frodo"]) == 0
        assert "Mungo and Frodo have no common ancestor" in capsys.readouterr().out

    def test_table_input(self, tmp_path, capsys):
        path = tmp_path / "hobbits.csv"
        path.write_text(
            'parent,children\nMungo,"Bungo,Belba"\nBungo,Bilbo\nBelba,Frodo\n',
            encoding="utf-8"
        )

        assert main([str(path), "--table"]) == 0
        assert "is Mungo" in capsys.readouterr().out

    def test_bad_input(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("A:B\nZ:Y\n", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "Input file trouble:" in capsys.readouterr().out

    def test_unknown_person(self, tmp_path, capsys):
        path = tmp_path / "hobbits.txt"
        path.write_text(HOBBITS, encoding="utf-8")

        assert main([str(path), "Bilbo", "Gandalf"]) == 1
        assert "Input file trouble:" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "IO trouble:" in capsys.readouterr().out

    def test_invalid_log_level(self, tmp_path, capsys):
        path = tmp_path / "hobbits.txt"
        path.write_text(HOBBITS, encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--log-level", "LOUD"])
        assert exc_info.value.code == 2
        assert "--log-level" in capsys.readouterr().err

    def test_log_level_case_insensitive(self, tmp_path, capsys):
        path = tmp_path / "hobbits.txt"
        path.write_text(HOBBITS, encoding="utf-8")

        assert main([str(path), "--log-level", "error"]) == 0
        assert "is Mungo" in capsys.readouterr().out
