from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from systemmap.bodies import BodyType, CelestialBodyRecord
from systemmap.constants import (
    ICON_BELT_SIZE,
    ICON_MAX_PLANET_SIZE,
    ICON_MAX_STAR_SIZE,
    ICON_MIN_SIZE,
    ICON_SCALE_POWER,
    MIN_BODY_MASS,
    MIN_PLANET_MAX_MASS,
    MIN_STAR_MAX_MASS,
)


@dataclass(frozen=True)
class IconScale:
    """Size band used to turn body masses into icon sizes."""

    min_size: float = ICON_MIN_SIZE
    max_star_size: float = ICON_MAX_STAR_SIZE
    max_planet_size: float = ICON_MAX_PLANET_SIZE
    belt_size: float = ICON_BELT_SIZE
    power: float = ICON_SCALE_POWER

    def __post_init__(self):
        if self.min_size >= self.max_planet_size or self.min_size >= self.max_star_size:
            raise ValueError(
                f"Minimum icon size ({self.min_size}) must be smaller than the maximum sizes "
                f"(star: {self.max_star_size}, planet: {self.max_planet_size})"
            )
        if self.power <= 0:
            raise ValueError(f"Scale power must be positive, got {self.power}")


DEFAULT_ICON_SCALE = IconScale()


def mass_based_sizes(
    masses: Union[Sequence[Optional[float]], np.ndarray],
    max_mass: float,
    is_star: bool,
    scale: Optional[IconScale] = None,
) -> np.ndarray:
    """
    Map the masses of bodies of one category to icon sizes.

    ``size = min + (max - min) * (mass / max_mass) ** power``, never below the minimum size.
    Missing, zero or negative masses are replaced by a small positive mass, and the maximum
    mass is floored by a category specific epsilon, so the result is always finite.

    Args:
        masses: masses of the bodies, None or NaN for unknown masses.
        max_mass: largest mass observed in the category (stars, or planets and moons).
        is_star: whether the bodies are stars; stars use a larger maximum size.
        scale: size band to use, defaults to :data:`DEFAULT_ICON_SCALE`.

    Returns:
        One size per input mass.
    """
    scale = scale or DEFAULT_ICON_SCALE
    masses = np.array([np.nan if m is None else m for m in masses], dtype=float)
    masses[~(masses > 0)] = MIN_BODY_MASS

    if is_star:
        max_size, epsilon = scale.max_star_size, MIN_STAR_MAX_MASS
    else:
        max_size, epsilon = scale.max_planet_size, MIN_PLANET_MAX_MASS

    scale_factor = np.power(masses / max(max_mass, epsilon), scale.power)
    sizes = scale.min_size + (max_size - scale.min_size) * scale_factor
    return np.maximum(sizes, scale.min_size)


def mass_based_size(
    mass: Optional[float],
    body_type: str,
    max_mass_for_category: float,
    scale: Optional[IconScale] = None,
) -> float:
    """Icon size of a single body; belts always get the fixed belt size."""
    scale = scale or DEFAULT_ICON_SCALE
    if body_type == BodyType.BELT:
        return float(scale.belt_size)
    sizes = mass_based_sizes([mass], max_mass_for_category, is_star=body_type == BodyType.STAR, scale=scale)
    return float(sizes[0])


def body_icon_size(
    body: CelestialBodyRecord, max_star_mass: float, max_planet_mass: float, scale: Optional[IconScale] = None
) -> float:
    max_mass = max_star_mass if body.is_star else max_planet_mass
    return mass_based_size(body.mass, body.body_type, max_mass, scale=scale)
