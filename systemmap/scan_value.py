"""
Exploration scan values of bodies.

Base values are the lowest Full Spectrum Scan values per class; the multipliers are the
exploration bonuses for first discovery and surface mapping.
"""

import math
from dataclasses import dataclass
from typing import Optional

from systemmap.bodies import BodyType, CelestialBodyRecord
from systemmap.utils.normalization import STAR_TYPE_DISPLAY, normalize_planet_class, normalize_star_type

BASE_SCAN_VALUES: dict[str, int] = {
    # Stars, by canonical star type
    "o": 4170,
    "b": 3012,
    "a": 2950,
    "f": 2932,
    "g": 2923,
    "k": 2911,
    "m": 2887,
    "l": 2881,
    "t": 2881,
    "y": 2881,
    "tts": 2900,
    "aebe": 2900,
    "w": 2900,
    "wn": 2900,
    "wnc": 2900,
    "wc": 2900,
    "wo": 2900,
    "cs": 2900,
    "s": 2900,
    "d": 14000,
    "n": 22000,
    "h": 22000,
    "supermassive_black_hole": 22000,
    # Terrestrial bodies, by canonical planet class
    "earth_like_world": 270000,
    "ammonia_world": 143000,
    "water_world": 99000,
    "metal_rich_body": 31000,
    "high_metal_content_world": 14000,
    "rocky_body": 500,
    "rocky_ice_body": 500,
    "icy_body": 500,
    "rocky_ice_world": 500,
    # Gas giants
    "gas_giant_with_water_based_life": 900,
    "gas_giant_with_ammonia_based_life": 900,
    "class_i_gas_giant": 3800,
    "class_ii_gas_giant": 28000,
    "class_iii_gas_giant": 900,
    "class_iv_gas_giant": 900,
    "class_v_gas_giant": 900,
    "helium_rich_gas_giant": 900,
    "helium_gas_giant": 900,
    "water_giant": 900,
    "water_giant_with_life": 900,
}
DEFAULT_BASE_SCAN_VALUE = 500

TERRAFORMABLE_BONUS: dict[str, int] = {
    "high_metal_content_world": 149000,
    "metal_rich_body": 0,
    "rocky_body": 128500,
    "water_world": 169000,
}

FIRST_DISCOVERY_MULTIPLIER = 1.5
DSS_MAPPING_MULTIPLIER = 3.33
FIRST_MAPPED_MULTIPLIER = 1.5

NO_SCAN_VALUE_BODY_TYPES = (BodyType.BELT, BodyType.RING)
MAPPED_SCAN_TYPE = "Mapped"


@dataclass(frozen=True)
class ScanValueResult:
    base_value: int
    terraform_bonus: int
    subtotal: int
    discovery_multiplier: float
    mapping_multiplier: float
    final_value: int


def base_scan_value(sub_type: Optional[str]) -> int:
    """Base value of a subtype, looked up as a planet class first and then as a star type."""
    if not sub_type:
        return DEFAULT_BASE_SCAN_VALUE
    planet_class = normalize_planet_class(sub_type)
    if planet_class in BASE_SCAN_VALUES:
        return BASE_SCAN_VALUES[planet_class]

    star_type = normalize_star_type(sub_type)
    # White dwarf subclasses ("da", "dav"...) share the white dwarf value
    if star_type.startswith("d") and star_type in STAR_TYPE_DISPLAY:
        star_type = "d"
    return BASE_SCAN_VALUES.get(star_type, DEFAULT_BASE_SCAN_VALUE)


def terraform_bonus(sub_type: Optional[str]) -> Optional[int]:
    if not sub_type:
        return None
    return TERRAFORMABLE_BONUS.get(normalize_planet_class(sub_type))


def calculate_scan_value(
    sub_type: Optional[str], terraformable: bool, was_discovered: bool, was_mapped: bool, is_mapped: bool
) -> ScanValueResult:
    """
    Compute the value of a scanned body.

    Args:
        sub_type: planet class or star type of the body.
        terraformable: whether the body is a terraforming candidate.
        was_discovered: whether someone else discovered the body first.
        was_mapped: whether someone else mapped the body first.
        is_mapped: whether the body has been surface mapped.

    Returns:
        The breakdown of the value; ``final_value`` is rounded to whole credits.
    """
    base_value = base_scan_value(sub_type)
    bonus = terraform_bonus(sub_type)
    bonus = bonus if terraformable and bonus is not None else 0
    subtotal = base_value + bonus

    discovery_multiplier = 1.0 if was_discovered else FIRST_DISCOVERY_MULTIPLIER
    if not is_mapped:
        mapping_multiplier = 1.0
    elif was_mapped:
        mapping_multiplier = DSS_MAPPING_MULTIPLIER
    else:
        mapping_multiplier = DSS_MAPPING_MULTIPLIER * FIRST_MAPPED_MULTIPLIER

    return ScanValueResult(
        base_value=base_value,
        terraform_bonus=bonus,
        subtotal=subtotal,
        discovery_multiplier=discovery_multiplier,
        mapping_multiplier=mapping_multiplier,
        final_value=_round_half_up(subtotal * discovery_multiplier * mapping_multiplier),
    )


def estimate_fss_value(sub_type: Optional[str], terraformable: bool, body_type: str) -> int:
    """Lowest expected value of a body before mapping, assuming a first discovery. Belts and rings are worth 0."""
    if body_type in NO_SCAN_VALUE_BODY_TYPES:
        return 0
    bonus = terraform_bonus(sub_type)
    subtotal = base_scan_value(sub_type) + (bonus if terraformable and bonus is not None else 0)
    return _round_half_up(subtotal * FIRST_DISCOVERY_MULTIPLIER)


def estimate_scan_value(body: CelestialBodyRecord) -> int:
    """The stored scan value of a body when known, otherwise an estimate from its scan state."""
    if body.scan_value > 0:
        return body.scan_value
    if body.body_type in NO_SCAN_VALUE_BODY_TYPES:
        return 0

    base_value = base_scan_value(body.sub_type)
    bonus = terraform_bonus(body.sub_type)
    if body.terraformable and bonus is not None:
        base_value += bonus

    multiplier = 1.0
    if not body.was_discovered:
        multiplier *= FIRST_DISCOVERY_MULTIPLIER
    if body.scan_type == MAPPED_SCAN_TYPE:
        multiplier *= DSS_MAPPING_MULTIPLIER if body.was_mapped else DSS_MAPPING_MULTIPLIER * FIRST_MAPPED_MULTIPLIER
    return _round_half_up(base_value * multiplier)


def _round_half_up(value: float) -> int:
    # Credits round half up, 4330.5 gives 4331
    return int(math.floor(value + 0.5))
