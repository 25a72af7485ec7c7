"""
Unit Tests — Shared list filters, lenient parsing and the record store.
"""

from dataclasses import dataclass

import pytest

from dashboard.errors import DeletionNotConfirmed
from dashboard.filters import distinct, filter_exact, search
from dashboard.parsing import coerce_float, coerce_int, reject_nulls
from dashboard.products import compute_margin
from dashboard.store import RecordStore


@dataclass
class Row:
    id: int
    name: str
    sku: str
    category: str


ROWS = [
    Row(1, "Red Shirt", "SH-R", "Clothing"),
    Row(2, "Blue Shirt", "SH-B", "Clothing"),
    Row(3, "Red Kettle", "KT-R", "Kitchen"),
]


class TestFilters:

    def test_search_is_case_insensitive(self):
        assert [r.id for r in search(ROWS, "RED")] == [1, 3]
        assert [r.id for r in search(ROWS, "sh-b")] == [2]

    def test_blank_search_matches_all(self):
        assert search(ROWS, "   ") == ROWS
        assert search(ROWS, None) == ROWS

    def test_filter_exact_wildcards(self):
        assert filter_exact(ROWS, "category", "all") == ROWS
        assert filter_exact(ROWS, "category", "") == ROWS
        assert [r.id for r in filter_exact(ROWS, "category", "Kitchen")] == [3]

    def test_filters_commute(self):
        a = filter_exact(search(ROWS, "red"), "category", "Clothing")
        b = search(filter_exact(ROWS, "category", "Clothing"), "red")
        assert a == b == [ROWS[0]]

    def test_distinct_keeps_first_seen_order(self):
        assert distinct(ROWS, "category") == ["Clothing", "Kitchen"]


class TestParsing:

    @pytest.mark.parametrize("raw, expected", [("12.5", 12.5), (" 3 ", 3.0), ("abc", 0.0), ("", 0.0), (None, 0.0), (7, 7.0)])
    def test_coerce_float(self, raw, expected):
        assert coerce_float(raw) == expected

    @pytest.mark.parametrize("raw, expected", [("12", 12), ("12.9", 12), ("x", 0), (None, 0), (4.7, 4), (True, 0)])
    def test_coerce_int(self, raw, expected):
        assert coerce_int(raw) == expected

    def test_margin(self):
        assert compute_margin(999.99, 750.0) == 25.0
        assert compute_margin(0, 10) == 0.0
        assert compute_margin(10, 15) == -50.0


class TestRecordStore:

    def test_add_assigns_fresh_increasing_ids(self):
        store = RecordStore(ROWS)
        first = store.add(Row(0, "Green Shirt", "SH-G", "Clothing"))
        second = store.add(Row(0, "Green Kettle", "KT-G", "Kitchen"))
        assert first.id > 3
        assert second.id > first.id
        assert len(store) == 5

    def test_edit_ignores_id_and_unknown_fields(self):
        store = RecordStore(ROWS)
        edited = store.edit(2, {"id": 99, "name": "Navy Shirt", "colour": "navy"})
        assert edited == Row(2, "Navy Shirt", "SH-B", "Clothing")
        assert store.get(99) is None

    def test_edit_missing_record(self):
        assert RecordStore(ROWS).edit(42, {"name": "x"}) is None

    def test_remove_requires_confirmation(self):
        store = RecordStore(ROWS)
        with pytest.raises(DeletionNotConfirmed):
            store.remove(1, confirmed=False)
        assert len(store) == 3

        removed = store.remove(1, confirmed=True)
        assert removed.id == 1
        assert [r.id for r in store] == [2, 3]
        assert store.remove(1, confirmed=True) is None


class TestRejectNulls:

    def test_explicit_null_is_rejected(self):
        with pytest.raises(ValueError, match="price, stock"):
            reject_nulls({"stock": None, "name": "x", "price": None})

    def test_values_pass_through(self):
        data = {"name": "x", "price": 0}
        assert reject_nulls(data) is data
