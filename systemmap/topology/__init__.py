"""Reconstruction of the orbital hierarchy of a star system."""

from .builder import SystemTopologyBuilder, build_system_topology
from .relations import (
    barycentric_designation,
    find_actual_parent_id,
    immediate_anchor_parent_id,
    parse_parents,
    star_designation,
)
from .system_topology import Placement, PlacedNode, StarSystemGroup, SystemTopology

__all__ = [
    "SystemTopologyBuilder",
    "build_system_topology",
    "SystemTopology",
    "StarSystemGroup",
    "PlacedNode",
    "Placement",
    "parse_parents",
    "immediate_anchor_parent_id",
    "find_actual_parent_id",
    "barycentric_designation",
    "star_designation",
]
