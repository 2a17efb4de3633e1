"""
Extraction of parent relations and naming hints from body records.

Bodies reference their parents through an ordered ``Parents`` list of single-key records
such as ``{"Null": 1}``, ``{"Ring": 5}`` or ``{"Star": 0}``, nearest parent first. ``Null``
entries point to orbital anchors (barycenters) that are not scannable bodies themselves.
"""

import re
from typing import Collection, Optional, Sequence, Union

from systemmap.bodies import BodyMetadata, CelestialBodyRecord, ParentRelation
from systemmap.bodies.metadata import RawMetadata
from systemmap.constants import ANCHOR_TAG

# "AB 1", "ABC 2 a": bodies orbiting the barycenter of stars A and B
_BARYCENTRIC_DESIGNATION = re.compile(r"^([A-Z]{2,})\s+\d")
# "B", "C 3": bodies belonging to one star slot
_STAR_DESIGNATION = re.compile(r"^([A-Z])(?:\s|$)")


def parse_parents(source: Union[CelestialBodyRecord, BodyMetadata, RawMetadata]) -> list[ParentRelation]:
    """
    Returns the ordered parent relations of a body.

    Args:
        source: a body record, its already parsed metadata, or the raw metadata blob.

    Returns:
        The relations in the order they appear in the metadata. Empty if the metadata is
        missing or malformed; this function never raises.
    """
    if isinstance(source, CelestialBodyRecord):
        metadata = source.metadata
    elif isinstance(source, BodyMetadata):
        metadata = source
    else:
        metadata = BodyMetadata.from_raw_json(source)
    return list(metadata.parents)


def immediate_anchor_parent_id(parents: Sequence[ParentRelation]) -> Optional[int]:
    """The id of the first parent if it is an orbital anchor rather than a body, None otherwise."""
    if parents and parents[0].kind == ANCHOR_TAG:
        return parents[0].body_id
    return None


def find_actual_parent_id(
    parents: Sequence[ParentRelation], known_ids: Collection[int], self_id: Optional[int] = None
) -> Optional[int]:
    """
    Walks the parent list in order and returns the first id that belongs to a known body.

    Anchors that do not correspond to a scanned body are skipped, as are references of a body
    to itself.
    """
    for parent in parents:
        if parent.body_id != self_id and parent.body_id in known_ids:
            return parent.body_id
    return None


def barycentric_designation(body_name: str, system_name: str) -> Optional[str]:
    """
    The letter group of a body named after a barycenter, e.g. "AB" for "<system> AB 1".

    Returns None when the body name does not start with the system name or does not follow
    the convention.
    """
    return _match_designation(_BARYCENTRIC_DESIGNATION, body_name, system_name)


def star_designation(body_name: str, system_name: str) -> Optional[str]:
    """The star slot of a body, e.g. "B" for "<system> B" or "<system> B 3"."""
    return _match_designation(_STAR_DESIGNATION, body_name, system_name)


def _match_designation(pattern: re.Pattern, body_name: str, system_name: str) -> Optional[str]:
    if not body_name.startswith(system_name):
        return None
    match = pattern.match(body_name[len(system_name) :].strip())
    return match.group(1) if match else None
