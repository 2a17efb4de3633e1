from dataclasses import dataclass
from typing import Iterator

from .celestial_body import CelestialBodyRecord


@dataclass(frozen=True)
class TreeNode:
    """
    A body placed in the system hierarchy, with the bodies orbiting it sorted by body id.

    Nodes hold no reference to their parent; the parent of a node is found by walking the
    tree it belongs to.
    """

    body: CelestialBodyRecord
    children: tuple["TreeNode", ...] = ()

    @property
    def body_id(self) -> int:
        return self.body.body_id

    def iter_subtree(self) -> Iterator["TreeNode"]:
        """Yields this node and all its descendants, depth first, children in body id order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def subtree_size(self) -> int:
        return sum(1 for _ in self.iter_subtree())
