"""Helpers used by presentation layers: icon sizes, designations and class labels."""

from .formatting import format_number
from .labels import body_label, format_body_class, format_planet_class, format_star_class, short_designation, short_name
from .scale import DEFAULT_ICON_SCALE, IconScale, body_icon_size, mass_based_size, mass_based_sizes

__all__ = [
    "IconScale",
    "DEFAULT_ICON_SCALE",
    "mass_based_size",
    "mass_based_sizes",
    "body_icon_size",
    "short_name",
    "short_designation",
    "body_label",
    "format_star_class",
    "format_planet_class",
    "format_body_class",
    "format_number",
]
