import numpy as np
import pandas as pd
from astropy import units as u
from astropy.table import QTable

from systemmap import IconScale, build_system_topology
from systemmap.constants import ICON_BELT_SIZE, ICON_MIN_SIZE, NO_PARENT_ID
from systemmap.topology import Placement


class TestSystemTopology:
    def test_iter_nodes_display_order(self, binary_system_topology):
        """Star subtrees first, then barycenter groups, then orphans"""
        placed = list(binary_system_topology.iter_nodes())

        assert [p.node.body_id for p in placed] == [0, 3, 4, 10, 2, 5, 7, 9, 8, 14]
        assert [p.placement for p in placed] == [
            Placement.STAR,
            Placement.ORBITING,
            Placement.ORBITING,
            Placement.ORBITING,
            Placement.STAR,
            Placement.ORBITING,
            Placement.BARYCENTRIC,
            Placement.ORBITING,
            Placement.BARYCENTRIC,
            Placement.ORPHAN,
        ]

    def test_iter_nodes_depth_and_parent(self, binary_system_topology):
        placed = {p.node.body_id: p for p in binary_system_topology.iter_nodes()}

        assert placed[0].depth == 0 and placed[0].parent_id is None
        assert placed[3].depth == 1 and placed[3].parent_id == 0
        assert placed[4].depth == 2 and placed[4].parent_id == 3
        assert placed[9].parent_id == 7
        assert placed[9].group == "AB"
        assert placed[7].group == "AB"
        assert placed[14].group is None

    def test_len_counts_placed_nodes(self, binary_system_topology):
        assert len(binary_system_topology) == 10

    def test_find_node(self, binary_system_topology):
        assert binary_system_topology.find_node(9).body.name == "Synuefe XR-H d11-102 AB 1 a"
        assert binary_system_topology.find_node(12) is None
        assert binary_system_topology.find_node(999) is None

    def test_find_parent(self, binary_system_topology):
        """Parents are found by walking the tree"""
        assert binary_system_topology.find_parent(4).body_id == 3
        assert binary_system_topology.find_parent(10).body_id == 0
        assert binary_system_topology.find_parent(9).body_id == 7
        assert binary_system_topology.find_parent(0) is None
        assert binary_system_topology.find_parent(7) is None
        assert binary_system_topology.find_parent(14) is None

    def test_planets_are_star_children(self, binary_system_topology):
        for group in binary_system_topology.star_systems:
            assert group.planets == group.star.children


class TestTopologyExport:
    def test_to_qtable(self, binary_system_topology):
        table = binary_system_topology.to_qtable()

        assert isinstance(table, QTable)
        assert len(table) == 10
        assert list(table["body_id"]) == [0, 3, 4, 10, 2, 5, 7, 9, 8, 14]
        assert table.meta["system_name"] == "Synuefe XR-H d11-102"

        rows = {int(row["body_id"]): row for row in table}
        assert rows[0]["placement"] == "star"
        assert rows[0]["parent_id"] == NO_PARENT_ID
        assert rows[0]["designation"] == "A"
        assert rows[0]["class_label"] == "K-Class"
        assert rows[4]["parent_id"] == 3
        assert rows[4]["designation"] == "A 1 a"
        assert rows[4]["class_label"] == "RB"
        assert rows[7]["group"] == "AB"
        assert rows[7]["class_label"] == "C1GG"
        assert rows[10]["designation"] == "A Belt"
        assert rows[14]["placement"] == "orphan"

    def test_to_qtable_units(self, binary_system_topology):
        table = binary_system_topology.to_qtable()

        assert table["star_mass"].unit == u.M_sun
        assert table["body_mass"].unit == u.M_earth

        rows = {int(row["body_id"]): row for row in table}
        assert np.isclose(rows[0]["star_mass"].value, 0.8125)
        assert np.isnan(rows[0]["body_mass"].value)
        assert np.isclose(rows[7]["body_mass"].value, 95.3)
        assert np.isnan(rows[7]["star_mass"].value)
        assert np.isnan(rows[10]["body_mass"].value)

    def test_to_qtable_icon_sizes(self, binary_system_topology):
        table = binary_system_topology.to_qtable()
        rows = {int(row["body_id"]): row for row in table}

        # The heaviest body of each category gets the maximum size
        assert np.isclose(rows[0]["icon_size"], 256)
        assert np.isclose(rows[7]["icon_size"], 128)
        assert rows[10]["icon_size"] == ICON_BELT_SIZE
        assert all(size >= ICON_MIN_SIZE for size in table["icon_size"])

    def test_to_qtable_custom_scale(self, binary_system_topology):
        scale = IconScale(min_size=10, max_star_size=100, max_planet_size=50, belt_size=20)
        table = binary_system_topology.to_qtable(scale=scale)
        rows = {int(row["body_id"]): row for row in table}

        assert np.isclose(rows[0]["icon_size"], 100)
        assert np.isclose(rows[7]["icon_size"], 50)
        assert rows[10]["icon_size"] == 20

    def test_empty_to_qtable(self, system_name):
        table = build_system_topology([], system_name).to_qtable()
        assert len(table) == 0
        assert "body_id" in table.colnames

    def test_to_pandas(self, binary_system_topology):
        df = binary_system_topology.to_pandas()

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 10
        assert df["body_id"].tolist() == [0, 3, 4, 10, 2, 5, 7, 9, 8, 14]
        assert set(df.loc[df["placement"] == "barycentric", "body_id"]) == {7, 8}

    def test_empty_to_pandas(self, system_name):
        df = build_system_topology([], system_name).to_pandas()
        assert df.empty
