import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np

from systemmap.bodies import CelestialBodyRecord, TreeNode
from systemmap.constants import ANCHOR_TAG, DEFAULT_MAX_MASS, PRIMARY_STAR_BODY_ID, RING_TAG, STAR_TAG

from .relations import barycentric_designation, find_actual_parent_id, immediate_anchor_parent_id
from .system_topology import StarSystemGroup, SystemTopology

logger = logging.getLogger(__name__)


@dataclass
class _BeltGroup:
    fragments: list[CelestialBodyRecord]
    star_id: Optional[int] = None
    has_anchor: bool = False


class SystemTopologyBuilder:
    """
    Rebuilds the orbital hierarchy of a star system from its flat list of body records.

    Nodes are kept in an id-indexed arena while building: parents are always resolved with a
    fresh lookup by id and edges are stored as child id lists. The immutable tree is only
    materialised at the end, with every level sorted by body id, so the result does not
    depend on the order of the input records.

    The builder holds no state across builds; :meth:`build` can be called repeatedly.
    """

    def __init__(self, bodies: Iterable[CelestialBodyRecord], system_name: str):
        self._bodies = list(bodies)
        self._system_name = system_name

    def build(self) -> SystemTopology:
        belt_fragments = [b for b in self._bodies if b.is_belt]
        main_bodies = {b.body_id: b for b in self._bodies if not b.is_belt and not b.is_ring}

        resolved_parents = {
            body_id: find_actual_parent_id(body.metadata.parents, main_bodies, self_id=body_id)
            for body_id, body in main_bodies.items()
            if not _is_primary_star(body)
        }
        _break_parent_cycles(resolved_parents)

        children: dict[int, list[int]] = defaultdict(list)
        root_ids: list[int] = []
        orphan_ids: list[int] = []
        barycenter_ids: dict[str, list[int]] = defaultdict(list)

        for body_id, body in main_bodies.items():
            if not body.is_star:
                continue
            parent_id = resolved_parents.get(body_id)
            if parent_id is None:
                root_ids.append(body_id)
            else:
                children[parent_id].append(body_id)

        for body_id, body in main_bodies.items():
            if body.is_star:
                continue
            parent_id = resolved_parents[body_id]
            designation = barycentric_designation(body.name, self._system_name)
            anchor_id = immediate_anchor_parent_id(body.metadata.parents)

            if designation and anchor_id is not None and parent_id is None:
                barycenter_ids[designation].append(body_id)
            elif parent_id is not None:
                children[parent_id].append(body_id)
            else:
                orphan_ids.append(body_id)

        belt_nodes: dict[int, TreeNode] = {}
        for ring_id, group in sorted(_group_belt_fragments(belt_fragments).items()):
            representative = min(group.fragments, key=lambda b: b.body_id)
            belt_nodes[representative.body_id] = TreeNode(body=representative)
            designation = barycentric_designation(representative.name, self._system_name)
            star_id = group.star_id if group.star_id in main_bodies else None

            if designation and group.has_anchor and star_id is None:
                barycenter_ids[designation].append(representative.body_id)
            elif star_id is not None:
                children[star_id].append(representative.body_id)
            else:
                logger.debug(f"Dropping belt of ring group {ring_id} in '{self._system_name}': no anchor found")

        def materialize(body_id: int) -> TreeNode:
            if body_id in belt_nodes:
                return belt_nodes[body_id]
            child_nodes = tuple(materialize(child_id) for child_id in sorted(children.get(body_id, ())))
            return TreeNode(body=main_bodies[body_id], children=child_nodes)

        max_star_mass, max_planet_mass = _max_masses(main_bodies.values())
        topology = SystemTopology(
            system_name=self._system_name,
            star_systems=tuple(StarSystemGroup(star=materialize(i)) for i in sorted(root_ids)),
            orphans=tuple(materialize(i) for i in sorted(orphan_ids)),
            barycentric_bodies={
                designation: tuple(materialize(i) for i in sorted(ids))
                for designation, ids in sorted(barycenter_ids.items())
            },
            max_star_mass=max_star_mass,
            max_planet_mass=max_planet_mass,
        )
        logger.debug(
            f"Built topology of '{self._system_name}': {len(topology.star_systems)} star roots, "
            f"{len(topology.barycentric_bodies)} barycenter groups, {len(topology.orphans)} orphans"
        )
        return topology


def build_system_topology(bodies: Iterable[CelestialBodyRecord], system_name: str) -> SystemTopology:
    """
    Reconstruct the hierarchy of a star system.

    Args:
        bodies: every scanned body of the system, in any order. Belt fragments of the same
            belt are merged, ring records are ignored.
        system_name: display name of the system, used to interpret body names.

    Returns:
        The star roots with their subtrees, the barycenter groups, the orphans and the mass
        maxima used for icon scaling. Malformed input never raises; it degrades to orphans.
    """
    return SystemTopologyBuilder(bodies, system_name).build()


def _is_primary_star(body: CelestialBodyRecord) -> bool:
    return body.is_star and body.body_id == PRIMARY_STAR_BODY_ID


def _break_parent_cycles(resolved_parents: dict[int, Optional[int]]):
    """
    Drops parent links that would make the hierarchy cyclic.

    In every cycle the member with the lowest body id loses its parent, which keeps the result
    independent of the input order.
    """
    for start_id in sorted(resolved_parents):
        path: list[int] = []
        current: Optional[int] = start_id
        while current is not None and current not in path:
            path.append(current)
            current = resolved_parents.get(current)
        if current is None:
            continue
        cycle = path[path.index(current) :]
        weakest = min(cycle)
        logger.debug(f"Breaking parent cycle {cycle} at body {weakest}")
        resolved_parents[weakest] = None


def _group_belt_fragments(fragments: Sequence[CelestialBodyRecord]) -> dict[int, _BeltGroup]:
    groups: dict[int, _BeltGroup] = {}
    for fragment in sorted(fragments, key=lambda b: b.body_id):
        parents = fragment.metadata.parents
        ring_id = next((p.body_id for p in parents if p.kind == RING_TAG), None)
        if ring_id is None:
            logger.debug(f"Ignoring belt fragment {fragment.body_id} ('{fragment.name}'): no ring group")
            continue

        group = groups.setdefault(ring_id, _BeltGroup(fragments=[]))
        group.fragments.append(fragment)
        if group.star_id is None:
            group.star_id = next((p.body_id for p in parents if p.kind == STAR_TAG), None)
        group.has_anchor = group.has_anchor or any(p.kind == ANCHOR_TAG for p in parents)
    return groups


def _max_masses(bodies: Iterable[CelestialBodyRecord]) -> tuple[float, float]:
    star_masses, planet_masses = [], []
    for body in bodies:
        (star_masses if body.is_star else planet_masses).append(body.mass or 0.0)
    return _max_or_default(star_masses), _max_or_default(planet_masses)


def _max_or_default(masses: list[float]) -> float:
    masses = np.asarray(masses, dtype=float)
    max_mass = float(np.max(masses[np.isfinite(masses)], initial=0.0))
    return max_mass if max_mass > 0 else DEFAULT_MAX_MASS
