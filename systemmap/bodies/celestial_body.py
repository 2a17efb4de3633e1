from enum import Enum
from functools import cached_property
from typing import Optional

import pydantic
from astropy import units as u
from astropy.units import Quantity
from pydantic import ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from systemmap.utils.normalization import normalize_body_type

from .metadata import BodyMetadata


class BodyType(str, Enum):
    STAR = "Star"
    PLANET = "Planet"
    MOON = "Moon"
    BELT = "Belt"
    RING = "Ring"


class CelestialBodyRecord(pydantic.BaseModel):
    """
    A scanned body of a single star system, as handed over by the persistence layer.

    Records are immutable. Field names accept both the snake_case attribute names and the
    camelCase keys of the stored form (``bodyId``, ``subType``, ``rawJson``...). The metadata
    blob in ``raw_json`` is only parsed when :attr:`metadata` is first accessed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    body_id: int
    name: str
    body_type: str = BodyType.PLANET.value
    sub_type: str = ""
    mass: Optional[float] = None
    raw_json: Optional[str] = None

    terraformable: bool = False
    was_discovered: bool = False
    was_mapped: bool = False
    scan_type: Optional[str] = None
    scan_value: int = 0

    @field_validator("body_type", mode="before")
    @classmethod
    def _normalize_body_type(cls, value):
        return normalize_body_type(value)

    @field_validator("sub_type", mode="before")
    @classmethod
    def _empty_sub_type(cls, value):
        return "" if value is None else value

    @cached_property
    def metadata(self) -> BodyMetadata:
        return BodyMetadata.from_raw_json(self.raw_json)

    @property
    def is_star(self) -> bool:
        return self.body_type == BodyType.STAR

    @property
    def is_belt(self) -> bool:
        return self.body_type == BodyType.BELT

    @property
    def is_ring(self) -> bool:
        return self.body_type == BodyType.RING

    @property
    def mass_quantity(self) -> Optional[Quantity]:
        """Mass with its unit: stellar masses are in solar masses, everything else in Earth masses."""
        if self.mass is None:
            return None
        return self.mass * (u.M_sun if self.is_star else u.M_earth)
