from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Mapping, Optional

import numpy as np
import pandas as pd
from astropy import units as u
from astropy.table import QTable

from systemmap.bodies import TreeNode
from systemmap.constants import DEFAULT_MAX_MASS, NO_PARENT_ID
from systemmap.display.labels import format_body_class, short_designation
from systemmap.display.scale import DEFAULT_ICON_SCALE, IconScale, mass_based_sizes


class Placement(str, Enum):
    STAR = "star"
    ORBITING = "orbiting"
    BARYCENTRIC = "barycentric"
    ORPHAN = "orphan"


@dataclass(frozen=True)
class StarSystemGroup:
    """A star root and the bodies orbiting it directly."""

    star: TreeNode

    @property
    def planets(self) -> tuple[TreeNode, ...]:
        return self.star.children


@dataclass(frozen=True)
class PlacedNode:
    node: TreeNode
    placement: Placement
    parent_id: Optional[int]
    depth: int
    group: Optional[str] = None


@dataclass(frozen=True)
class SystemTopology:
    """
    The reconstructed hierarchy of one star system.

    Every body except belts and rings appears exactly once: as a star root, somewhere in the
    subtree of a star root, in a barycenter group, or among the orphans (and their subtrees).
    Belts appear once per ring group. All collections are sorted by body id.
    """

    system_name: str
    star_systems: tuple[StarSystemGroup, ...] = ()
    orphans: tuple[TreeNode, ...] = ()
    barycentric_bodies: Mapping[str, tuple[TreeNode, ...]] = field(default_factory=dict)
    max_star_mass: float = DEFAULT_MAX_MASS
    max_planet_mass: float = DEFAULT_MAX_MASS

    def __len__(self):
        return sum(1 for _ in self.iter_nodes())

    @property
    def stars(self) -> tuple[TreeNode, ...]:
        return tuple(group.star for group in self.star_systems)

    def iter_nodes(self) -> Iterator[PlacedNode]:
        """
        Walks the whole result in display order: star roots with their subtrees, then the
        barycenter groups ordered by designation, then the orphans.
        """
        for group in self.star_systems:
            yield from _walk(group.star, Placement.STAR)
        for designation in sorted(self.barycentric_bodies):
            for node in self.barycentric_bodies[designation]:
                yield from _walk(node, Placement.BARYCENTRIC, group=designation)
        for node in self.orphans:
            yield from _walk(node, Placement.ORPHAN)

    def find_node(self, body_id: int) -> Optional[TreeNode]:
        for placed in self.iter_nodes():
            if placed.node.body_id == body_id:
                return placed.node
        return None

    def find_parent(self, body_id: int) -> Optional[TreeNode]:
        """The node a body was attached to, or None for roots, barycenter members and orphans."""
        for placed in self.iter_nodes():
            if any(child.body_id == body_id for child in placed.node.children):
                return placed.node
        return None

    def to_qtable(self, scale: Optional[IconScale] = None) -> QTable:
        """
        Flattens the hierarchy into a table, one row per placed body in display order.

        Stellar masses are reported in solar masses and all other masses in Earth masses; the
        mass column of the other category is NaN. ``parent_id`` is ``NO_PARENT_ID`` for bodies
        that are not attached to a parent.
        """
        scale = scale or DEFAULT_ICON_SCALE
        rows = list(self.iter_nodes())
        bodies = [placed.node.body for placed in rows]

        is_star = np.array([b.is_star for b in bodies], dtype=bool)
        is_belt = np.array([b.is_belt for b in bodies], dtype=bool)
        masses = np.array([np.nan if b.mass is None else b.mass for b in bodies], dtype=float)

        icon_size = np.full(len(rows), float(scale.belt_size))
        icon_size[is_star] = mass_based_sizes(masses[is_star], self.max_star_mass, is_star=True, scale=scale)
        others = ~is_star & ~is_belt
        icon_size[others] = mass_based_sizes(masses[others], self.max_planet_mass, is_star=False, scale=scale)

        table = QTable(
            {
                "body_id": np.array([b.body_id for b in bodies], dtype=int),
                "name": np.array([b.name for b in bodies], dtype=str),
                "body_type": np.array([b.body_type for b in bodies], dtype=str),
                "sub_type": np.array([b.sub_type for b in bodies], dtype=str),
                "placement": np.array([p.placement.value for p in rows], dtype=str),
                "parent_id": np.array([NO_PARENT_ID if p.parent_id is None else p.parent_id for p in rows], dtype=int),
                "depth": np.array([p.depth for p in rows], dtype=int),
                "group": np.array([p.group or "" for p in rows], dtype=str),
                "designation": np.array([short_designation(b, self.system_name) for b in bodies], dtype=str),
                "class_label": np.array([format_body_class(b.sub_type, b.body_type) for b in bodies], dtype=str),
                "icon_size": icon_size,
                "star_mass": np.where(is_star, masses, np.nan) * u.M_sun,
                "body_mass": np.where(is_star, np.nan, masses) * u.M_earth,
            }
        )
        table.meta["system_name"] = self.system_name
        table.meta["max_star_mass"] = self.max_star_mass
        table.meta["max_planet_mass"] = self.max_planet_mass
        return table

    def to_pandas(self) -> pd.DataFrame:
        table = self.to_qtable()
        if len(table) == 0:
            return pd.DataFrame()
        return table.to_pandas()


def _walk(
    node: TreeNode, placement: Placement, parent_id: Optional[int] = None, depth: int = 0, group: Optional[str] = None
) -> Iterator[PlacedNode]:
    yield PlacedNode(node=node, placement=placement, parent_id=parent_id, depth=depth, group=group)
    for child in node.children:
        yield from _walk(child, Placement.ORBITING, parent_id=node.body_id, depth=depth + 1, group=group)
