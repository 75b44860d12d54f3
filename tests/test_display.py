"""Tests for utils/display.py"""

from io import StringIO

from rich.console import Console

from relations import FiniteSet, Relation
from utils.display import (
    display_relation,
    display_set,
    relation_to_table,
    set_to_text,
)


def recording_console() -> Console:
    return Console(file=StringIO(), width=100, color_system=None)


class TestRelationToTable:
    def test_one_row_and_column_per_element(self):
        r = Relation(FiniteSet(range(3)), [(0, 1)])
        table = relation_to_table(r, title="R")
        assert table.row_count == 3
        assert len(table.columns) == 4
        assert table.title == "R"

    def test_display_marks_each_link(self):
        r = Relation(FiniteSet(range(4)), [(0, 1), (1, 2), (3, 3)])
        console = recording_console()
        display_relation(r, title="Demo", console=console)
        output = console.file.getvalue()
        assert "Demo" in output
        assert output.count("●") == 3


class TestSetToText:
    def test_plain_text(self):
        assert set_to_text(FiniteSet([3, 1, 2])).plain == "{1, 2, 3}"
        assert set_to_text(FiniteSet()).plain == "{}"

    def test_display(self):
        console = recording_console()
        display_set(FiniteSet(["b", "a"]), console)
        assert "{a, b}" in console.file.getvalue()
