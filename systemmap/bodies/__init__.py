"""Body records, their parsed metadata and the tree node wrapping them."""

from .celestial_body import BodyType, CelestialBodyRecord
from .metadata import BodyMetadata, ParentRelation, RingInfo, SignalEntry, has_rings, ring_composition
from .signals import BodySignals, parse_body_signals
from .tree_node import TreeNode

__all__ = [
    "BodyType",
    "CelestialBodyRecord",
    "BodyMetadata",
    "ParentRelation",
    "RingInfo",
    "SignalEntry",
    "TreeNode",
    "BodySignals",
    "parse_body_signals",
    "has_rings",
    "ring_composition",
]
