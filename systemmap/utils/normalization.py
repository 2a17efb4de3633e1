"""
Standardisation of journal and EDSM class strings.

Canonical keys are snake_case for planet classes and lowercase codes for star types.
Use the canonical keys when comparing or looking up constants, and the ``*_to_display``
functions when a human-readable form is needed.
"""

import re
from typing import Optional

PLANET_CLASS_DISPLAY: dict[str, str] = {
    "metal_rich_body": "Metal Rich Body",
    "high_metal_content_world": "High Metal Content World",
    "rocky_body": "Rocky Body",
    "rocky_ice_body": "Rocky Ice Body",
    "icy_body": "Icy Body",
    "rocky_ice_world": "Rocky Ice World",
    "earth_like_world": "Earth-Like World",
    "ammonia_world": "Ammonia World",
    "water_world": "Water World",
    "water_giant": "Water Giant",
    "water_giant_with_life": "Water Giant with Life",
    "gas_giant_with_water_based_life": "Gas Giant with Water-Based Life",
    "gas_giant_with_ammonia_based_life": "Gas Giant with Ammonia-Based Life",
    "class_i_gas_giant": "Class I Gas Giant",
    "class_ii_gas_giant": "Class II Gas Giant",
    "class_iii_gas_giant": "Class III Gas Giant",
    "class_iv_gas_giant": "Class IV Gas Giant",
    "class_v_gas_giant": "Class V Gas Giant",
    "helium_rich_gas_giant": "Helium Rich Gas Giant",
    "helium_gas_giant": "Helium Gas Giant",
}

_PLANET_CLASS_ALTERNATES = {
    "high metal content body": "high_metal_content_world",
    "earthlike body": "earth_like_world",
    "earth-like world": "earth_like_world",
    "rocky ice body": "rocky_ice_body",
    "rocky ice world": "rocky_ice_world",
}

_PLANET_CLASS_MAP: dict[str, str] = {display.lower(): canonical for canonical, display in PLANET_CLASS_DISPLAY.items()}
for _variant, _canonical in _PLANET_CLASS_ALTERNATES.items():
    _PLANET_CLASS_MAP.setdefault(_variant, _canonical)
for _canonical in PLANET_CLASS_DISPLAY:
    _PLANET_CLASS_MAP.setdefault(_canonical, _canonical)

_SUDARSKY_PREFIX = re.compile(r"^sudarsky[\s_]+", re.IGNORECASE)


def normalize_planet_class(value: Optional[str]) -> str:
    """
    Normalise a journal or EDSM planet class to its canonical snake_case key.

    Unknown classes are returned lowercased, with whitespace and dashes replaced by underscores.
    An empty or missing value returns an empty string.
    """
    if not value:
        return ""

    key = _SUDARSKY_PREFIX.sub("", value.strip()).lower()
    if key in _PLANET_CLASS_MAP:
        return _PLANET_CLASS_MAP[key]

    fuzzy = re.sub(r"\s+", "_", key).replace("-", "_")
    return _PLANET_CLASS_MAP.get(fuzzy, fuzzy or key)


def planet_class_to_display(value: Optional[str]) -> str:
    """Return the display form of a planet class, or the trimmed input if it is not a known class."""
    if not value:
        return ""
    s = value.strip()
    return PLANET_CLASS_DISPLAY.get(normalize_planet_class(s), s)


STAR_TYPE_DISPLAY: dict[str, str] = {
    "o": "O-Class",
    "b": "B-Class",
    "a": "A-Class",
    "f": "F-Class",
    "g": "G-Class",
    "k": "K-Class",
    "m": "M-Class (Red dwarf)",
    "l": "L-Class (Brown dwarf)",
    "t": "T-Class (Brown dwarf)",
    "y": "Y-Class (Brown dwarf)",
    "tts": "T Tauri Star",
    "aebe": "Herbig Ae/Be",
    "w": "Wolf-Rayet",
    "wn": "Wolf-Rayet (Nitrogen)",
    "wnc": "Wolf-Rayet (Nitrogen/Carbon)",
    "wc": "Wolf-Rayet (Carbon)",
    "wo": "Wolf-Rayet (Oxygen)",
    "cs": "Carbon Star",
    "c": "Carbon Star",
    "cn": "Carbon (Nitrogen)",
    "cj": "Carbon (J-type)",
    "ch": "Carbon (Hydrogen)",
    "chd": "Carbon (Hydrogen/Dwarf)",
    "ms": "M-S Transition Star",
    "s": "S-Type Star",
    "d": "White Dwarf",
    "da": "White Dwarf (Hydrogen)",
    "dab": "White Dwarf (Hydrogen/Helium)",
    "dao": "White Dwarf (Hydrogen/Oxygen)",
    "dav": "White Dwarf (Pulsating)",
    "daz": "White Dwarf (Metal-polluted)",
    "db": "White Dwarf (Helium)",
    "dbv": "White Dwarf (Helium Variable)",
    "dbz": "White Dwarf (Helium/Metal)",
    "dc": "White Dwarf (Continuous Spectrum)",
    "dcv": "White Dwarf (Cool Variable)",
    "do": "White Dwarf (Hot Helium)",
    "dov": "White Dwarf (Hot Variable)",
    "dq": "White Dwarf (Carbon)",
    "dx": "White Dwarf (Unclassified)",
    "n": "Neutron Star",
    "h": "Black Hole",
    "supermassive_black_hole": "Supermassive Black Hole",
}

_STAR_TYPE_VARIANTS = {
    "star": "g",
    "o (blue-white) star": "o",
    "b (blue-white) star": "b",
    "a (blue-white) star": "a",
    "f (white) star": "f",
    "g (white-yellow) star": "g",
    "k (yellow-orange) star": "k",
    "m (red dwarf) star": "m",
    "l (brown dwarf) star": "l",
    "t (brown dwarf) star": "t",
    "y (brown dwarf) star": "y",
    "t tauri star": "tts",
    "herbig ae/be star": "aebe",
    "wolf-rayet star": "w",
    "wolf-rayet wn star": "wn",
    "wolf-rayet wnc star": "wnc",
    "wolf-rayet wc star": "wc",
    "wolf-rayet wo star": "wo",
    "carbon star": "cs",
    "s-type star": "s",
    "white dwarf": "d",
    "neutron star": "n",
    "black hole": "h",
    "supermassive black hole": "supermassive_black_hole",
    "supermassiveblackhole": "supermassive_black_hole",
}

_STAR_TYPE_MAP: dict[str, str] = {code: code for code in STAR_TYPE_DISPLAY}
_STAR_TYPE_MAP.update(_STAR_TYPE_VARIANTS)

# Journal giant codes, e.g. "K_OrangeGiant" or "A_BlueWhiteSuperGiant"
_GIANT_CODE = re.compile(r"^([obafgkm])_[a-z]+giant$")
_SPECTRAL_LETTER = re.compile(r"\b([obafgkmltys])\b")
_WHITE_DWARF_CODE = re.compile(r"\bd([a-z]*)\b")


def normalize_star_type(value: Optional[str]) -> str:
    """
    Normalise a journal or EDSM star type to its canonical lowercase code.

    Extracts the spectral letter from strings like "K (Yellow-Orange) Star" and recognises the
    white dwarf, Wolf-Rayet, carbon and compact-object families. Unknown types are returned
    lowercased with whitespace replaced by underscores.
    """
    if not value:
        return ""

    key = value.strip().lower()
    if key in _STAR_TYPE_MAP:
        return _STAR_TYPE_MAP[key]

    giant = _GIANT_CODE.match(key)
    if giant:
        return giant.group(1)

    if "supermassive" in key:
        return "supermassive_black_hole"
    if "black hole" in key:
        return "h"
    if "neutron" in key:
        return "n"
    if "white dwarf" in key:
        sub_class = _WHITE_DWARF_CODE.search(key.replace("white dwarf", ""))
        if sub_class and "d" + sub_class.group(1) in STAR_TYPE_DISPLAY:
            return "d" + sub_class.group(1)
        return "d"
    if re.search(r"wolf-?rayet", key):
        for code in ("wnc", "wn", "wc", "wo"):
            if re.search(rf"\b{code}\b", key):
                return code
        return "w"
    if re.search(r"t\s*tauri|\btts\b", key):
        return "tts"
    if "herbig" in key or "ae/be" in key:
        return "aebe"
    if "carbon" in key:
        return "cs"
    if re.search(r"\bs-?type\b", key):
        return "s"

    letter = _SPECTRAL_LETTER.search(key)
    if letter:
        return letter.group(1)

    return re.sub(r"\s+", "_", key)


def star_type_to_display(value: Optional[str]) -> str:
    """Return the display form of a star type, or the trimmed input if it is not a known type."""
    if not value:
        return ""
    s = value.strip()
    return STAR_TYPE_DISPLAY.get(normalize_star_type(s), s)


_BODY_TYPES = {"star": "Star", "planet": "Planet", "moon": "Moon", "belt": "Belt", "ring": "Ring"}


def normalize_body_type(value: Optional[str]) -> str:
    """Body types are already standardised by the journal; only casing is normalised. Empty means Planet."""
    if not value:
        return "Planet"
    stripped = value.strip()
    return _BODY_TYPES.get(stripped.lower(), stripped)
