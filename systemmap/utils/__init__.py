from .normalization import (
    normalize_body_type,
    normalize_planet_class,
    normalize_star_type,
    planet_class_to_display,
    star_type_to_display,
)

__all__ = [
    "normalize_body_type",
    "normalize_planet_class",
    "normalize_star_type",
    "planet_class_to_display",
    "star_type_to_display",
]
