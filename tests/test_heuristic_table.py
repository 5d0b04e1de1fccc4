from __future__ import annotations

import pytest

from classes_de_elementos.erros import InvalidHeuristic, InvalidWeight, MissingHeuristic
from classes_de_elementos.heuristic_table import HeuristicTable


def test_lookup_is_ordered():
    table = HeuristicTable.from_entries([("A", "B", 10), ("B", "A", 7)])

    assert table.h("A", "B") == 10
    assert table.h("B", "A") == 7
    with pytest.raises(MissingHeuristic):
        table.h("A", "C")


def test_goal_to_itself_is_zero_without_an_entry():
    table = HeuristicTable()
    assert table.h("G", "G") == 0


def test_missing_entry_is_an_error_not_zero():
    table = HeuristicTable.from_entries([("A", "B", 10)])

    with pytest.raises(MissingHeuristic) as exc_info:
        table.h("C", "B")

    assert exc_info.value.node == "C"
    assert exc_info.value.goal == "B"
    assert isinstance(exc_info.value, LookupError)


def test_zero_table_answers_zero_for_any_pair():
    table = HeuristicTable.zero()

    assert table.h("A", "B") == 0
    assert table.h("anything", "else") == 0
    assert len(table) == 0


def test_goals_in_first_seen_order():
    table = HeuristicTable.from_entries([("A", "G", 1), ("B", "H", 2), ("C", "G", 3)])
    assert table.goals() == ["G", "H"]


def test_repeated_entry_last_wins():
    table = HeuristicTable.from_entries([("A", "B", 10), ("A", "B", 4)])

    assert table.h("A", "B") == 4
    assert len(table) == 1


def test_rejects_negative_and_non_integer_estimates():
    with pytest.raises(InvalidWeight):
        HeuristicTable.from_entries([("A", "B", -1)])
    with pytest.raises(InvalidWeight):
        HeuristicTable.from_entries([("A", "B", 1.5)])


def test_rejects_nonzero_goal_to_itself():
    with pytest.raises(InvalidHeuristic):
        HeuristicTable.from_entries([("G", "G", 3)])
    assert HeuristicTable.from_entries([("G", "G", 0)]).h("G", "G") == 0


def test_constructor_accepts_mapping():
    table = HeuristicTable({("A", "B"): 5})
    assert table.h("A", "B") == 5
    assert len(table) == 1
