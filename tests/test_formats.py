"""Tests for tableops.formats — Python data conversion."""

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tableops.core import Table, Absent, is_array, is_sequence
from tableops.formats import from_python, to_python
from tableops.mapping import reconcile


class TestFromPython:

    def test_list_becomes_sequence(self):
        assert from_python([1, 2, 3]) == Table.seq(1, 2, 3)

    def test_tuple_becomes_sequence(self):
        assert from_python(("a", "b")) == Table.seq("a", "b")

    def test_dict_becomes_mapping(self):
        assert from_python({"a": 1}) == Table({"a": 1})

    def test_nested(self):
        result = from_python({"users": [{"name": "Alice"}], "count": 1})
        assert result == Table({"users": Table.seq(Table({"name": "Alice"})), "count": 1})

    @pytest.mark.parametrize("obj", [0, 3.5, "text", True, b"raw"])
    def test_scalars_pass_through(self, obj):
        assert from_python(obj) is obj

    def test_none_becomes_absent(self):
        assert from_python(None) is Absent

    def test_none_inside_list_leaves_hole(self):
        t = from_python([1, None, 3])
        assert t.entries == {1: 1, 3: 3}
        assert is_array(t)
        assert not is_sequence(t)
        assert len(t) == 1


class TestToPython:

    def test_sequence_becomes_list(self):
        assert to_python(Table.seq(1, 2)) == [1, 2]

    def test_mapping_becomes_dict(self):
        assert to_python(Table({"a": Table.seq(1)})) == {"a": [1]}

    def test_sparse_table_becomes_dict(self):
        assert to_python(Table({1: "a", 3: "c"})) == {1: "a", 3: "c"}

    def test_empty_table_becomes_list(self):
        assert to_python(Table()) == []

    def test_absent_becomes_none(self):
        assert to_python(Absent) is None

    @pytest.mark.parametrize("obj", [
        [1, 2, 3],
        {"a": 1, "b": {"c": "d"}},
        {"config": {"debug": True, "ports": [80, 443]}, "name": "svc"},
        [[1, 2], [3, [4, 5]]],
        "plain",
    ])
    def test_round_trip(self, obj):
        assert to_python(from_python(obj)) == obj


class TestConfigDefaults:

    def test_defaults_for_a_config(self):
        """Fill a partial config from a defaults document."""
        config = from_python({"server": {"port": 9000}, "name": "api"})
        defaults = from_python(
            {"server": {"port": 8080, "host": "0.0.0.0"}, "debug": False}
        )
        merged = reconcile(config, defaults)
        assert to_python(merged) == {
            "server": {"port": 9000, "host": "0.0.0.0"},
            "name": "api",
            "debug": False,
        }
