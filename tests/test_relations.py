import json

import pytest

from systemmap.bodies import BodyMetadata, ParentRelation
from systemmap.topology import (
    barycentric_designation,
    find_actual_parent_id,
    immediate_anchor_parent_id,
    parse_parents,
    star_designation,
)


class TestParseParents:
    def test_ordered_relations(self):
        raw = json.dumps({"Parents": [{"Planet": 3}, {"Star": 0}, {"Null": 1}]})
        assert parse_parents(raw) == [
            ParentRelation(kind="Planet", body_id=3),
            ParentRelation(kind="Star", body_id=0),
            ParentRelation(kind="Null", body_id=1),
        ]

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "",
            "{not json",
            "[1, 2, 3]",
            json.dumps({"Parents": None}),
            json.dumps({"Parents": "Star 0"}),
            json.dumps({"Parents": [{"Star": "zero"}]}),
            json.dumps({"Parents": [3, 4]}),
            json.dumps({"BodyID": 4}),
        ],
    )
    def test_malformed_metadata_yields_no_parents(self, raw):
        assert parse_parents(raw) == []

    def test_empty_entries_are_skipped(self):
        raw = json.dumps({"Parents": [{}, {"Star": 0}]})
        assert parse_parents(raw) == [ParentRelation(kind="Star", body_id=0)]

    def test_accepts_records_and_metadata(self, make_body):
        body = make_body(4, "1 a", body_type="Moon", parents=[{"Planet": 3}])
        expected = [ParentRelation(kind="Planet", body_id=3)]

        assert parse_parents(body) == expected
        assert parse_parents(body.metadata) == expected
        assert parse_parents({"Parents": [{"Planet": 3}]}) == expected


class TestImmediateAnchorParent:
    def test_first_entry_is_anchor(self):
        parents = [ParentRelation("Null", 6), ParentRelation("Star", 0)]
        assert immediate_anchor_parent_id(parents) == 6

    def test_anchor_not_first(self):
        parents = [ParentRelation("Star", 0), ParentRelation("Null", 1)]
        assert immediate_anchor_parent_id(parents) is None

    def test_no_parents(self):
        assert immediate_anchor_parent_id([]) is None


class TestFindActualParent:
    def test_first_known_id_wins(self):
        parents = [ParentRelation("Null", 6), ParentRelation("Planet", 3), ParentRelation("Star", 0)]
        assert find_actual_parent_id(parents, {0, 3}) == 3

    def test_no_known_id(self):
        parents = [ParentRelation("Null", 6), ParentRelation("Null", 1)]
        assert find_actual_parent_id(parents, {0, 3}) is None

    def test_skips_self_reference(self):
        parents = [ParentRelation("Planet", 3), ParentRelation("Star", 0)]
        assert find_actual_parent_id(parents, {0, 3}, self_id=3) == 0


class TestDesignations:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Sol AB 1", "AB"),
            ("Sol ABC 2 a", "ABC"),
            ("Sol AB 1 Belt Cluster 1", "AB"),
            ("Sol A 1", None),
            ("Sol AB Belt Cluster 1", None),
            ("Sol AB1", None),
            ("Sol 3", None),
            ("Other AB 1", None),
        ],
    )
    def test_barycentric_designation(self, name, expected):
        assert barycentric_designation(name, "Sol") == expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Sol B", "B"),
            ("Sol C 3", "C"),
            ("Sol AB 1", None),
            ("Sol 3", None),
            ("Sol", None),
            ("Other B", None),
        ],
    )
    def test_star_designation(self, name, expected):
        assert star_designation(name, "Sol") == expected

    def test_designation_of_real_system_name(self):
        system_name = "Col 285 Sector AB-C d12"
        assert barycentric_designation(f"{system_name} AB 1", system_name) == "AB"
        assert star_designation(f"{system_name} B 2", system_name) == "B"


def test_metadata_parents_are_immutable():
    metadata = BodyMetadata.from_raw_json({"Parents": [{"Star": 0}]})
    assert isinstance(metadata.parents, tuple)
