import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import pydantic
from pydantic import AliasChoices, ConfigDict, Field, TypeAdapter
from typing_extensions import Self

logger = logging.getLogger(__name__)

RawMetadata = Union[str, bytes, Mapping[str, Any], None]


@dataclass(frozen=True)
class ParentRelation:
    """One entry of a body's ``Parents`` list: the relation tag and the id it points to."""

    kind: str
    body_id: int


class RingInfo(pydantic.BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(default="", validation_alias=AliasChoices("Name", "name"))
    ring_class: str = Field(default="", validation_alias=AliasChoices("RingClass", "ringClass", "type"))


class SignalEntry(pydantic.BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    signal_type: str = Field(default="", validation_alias=AliasChoices("Type", "type"))
    count: Optional[int] = Field(default=None, validation_alias=AliasChoices("Count", "count"))


_PARENTS_ADAPTER = TypeAdapter(list[dict[str, int]])
_RINGS_ADAPTER = TypeAdapter(list[RingInfo])
_SIGNALS_ADAPTER = TypeAdapter(list[SignalEntry])


class BodyMetadata(pydantic.BaseModel):
    """
    Typed view of the free-form metadata blob attached to a scanned body.

    The blob is parsed once, at the boundary, and every field is validated on its own: a
    ``Parents`` list with the wrong shape leaves ``parents`` empty without affecting ``rings``
    or ``signals``. Parsing never raises.
    """

    model_config = ConfigDict(frozen=True)

    parents: tuple[ParentRelation, ...] = ()
    rings: tuple[RingInfo, ...] = ()
    signals: tuple[SignalEntry, ...] = ()

    @classmethod
    def from_raw_json(cls, raw: RawMetadata) -> Self:
        """
        Parse a raw metadata blob.

        Args:
            raw: JSON text (or bytes), an already decoded mapping, or None.

        Returns:
            The parsed metadata. Missing, unparsable or non-conforming fields are empty.
        """
        data = _load_json_object(raw)
        parent_entries = _validate_or_empty(_PARENTS_ADAPTER, data.get("Parents"), "Parents")
        parents = [
            ParentRelation(kind=kind, body_id=body_id)
            for entry in parent_entries
            # Each entry is a single-key record; the key is the relation tag
            for kind, body_id in list(entry.items())[:1]
        ]
        rings = _validate_or_empty(_RINGS_ADAPTER, _get_either(data, "Rings", "rings"), "Rings")
        signals = _validate_or_empty(_SIGNALS_ADAPTER, _get_either(data, "Signals", "signals"), "Signals")
        return cls(parents=tuple(parents), rings=tuple(rings), signals=tuple(signals))


def has_rings(metadata: BodyMetadata) -> bool:
    return len(metadata.rings) > 0


def ring_composition(metadata: BodyMetadata) -> Optional[str]:
    """
    Classify the composition of the first ring (or belt) of a body.

    Returns:
        One of "metal_rich", "metallic", "icy", "rocky", or None when there is no ring
        or its class is not recognised.
    """
    if not metadata.rings:
        return None

    ring_class = metadata.rings[0].ring_class.lower()
    if any(token in ring_class for token in ("metalric", "metal rich", "metalrich")):
        return "metal_rich"
    if "metal" in ring_class:
        return "metallic"
    if "icy" in ring_class or "ice" in ring_class:
        return "icy"
    if "rock" in ring_class:
        return "rocky"
    return None


def _load_json_object(raw: RawMetadata) -> dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return dict(raw)
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug("Metadata blob is not valid JSON, ignoring it")
        return {}
    return data if isinstance(data, dict) else {}


def _get_either(data: dict[str, Any], key: str, fallback_key: str) -> Any:
    value = data.get(key)
    return value if value is not None else data.get(fallback_key)


def _validate_or_empty(adapter: TypeAdapter, value: Any, field_name: str) -> list:
    if value is None:
        return []
    try:
        return adapter.validate_python(value)
    except pydantic.ValidationError:
        logger.debug(f"Ignoring malformed '{field_name}' metadata")
        return []
