"""
Short designations and compact class labels for bodies.

Class labels come from ordered decision tables: each :class:`ClassRule` pairs a predicate on
the subtype with the label to use, and the first matching rule wins.
"""

import re
from typing import Callable, NamedTuple, Optional, Sequence, Union

from systemmap.bodies import BodyType, CelestialBodyRecord
from systemmap.constants import PRIMARY_STAR_BODY_ID
from systemmap.utils.normalization import planet_class_to_display, star_type_to_display

_BELT_DESIGNATION = re.compile(r"^([A-Z]+\s*Belt)", re.IGNORECASE)


def short_name(body_name: str, system_name: str) -> str:
    """
    The system relative part of a body name, e.g. "B 3 a" for "<system> B 3 a".

    Belt names are cut after the word "Belt" ("A Belt Cluster 4" gives "A Belt"). Names that
    do not start with the system name, or are equal to it, fall back to their last word.
    """
    if body_name.startswith(system_name):
        designation = body_name[len(system_name) :].strip()
        if "Belt" in designation:
            belt = _BELT_DESIGNATION.match(designation)
            if belt:
                return belt.group(1)
        if designation:
            return designation
    return _last_word(body_name)


def short_designation(body: CelestialBodyRecord, system_name: str) -> str:
    if body.is_star and body.body_id == PRIMARY_STAR_BODY_ID:
        return "A"
    return short_name(body.name, system_name)


def body_label(body: CelestialBodyRecord, system_name: str) -> str:
    designation = short_designation(body, system_name)
    if body.is_star:
        return f"Star {designation or '?'}"
    if body.is_belt:
        return designation
    if body.body_type == BodyType.MOON:
        return f"Moon {designation}"
    return f"Planet {designation}"


def _last_word(name: str) -> str:
    words = name.split()
    return words[-1] if words else name


class _Subject(NamedTuple):
    raw: str
    s: str


class ClassRule(NamedTuple):
    matches: Callable[[_Subject], bool]
    label: Union[str, Callable[[_Subject], str]]


def _first_match(rules: Sequence[ClassRule], subject: _Subject) -> Optional[str]:
    for rule in rules:
        if rule.matches(subject):
            return rule.label(subject) if callable(rule.label) else rule.label
    return None


def _contains(*tokens: str) -> Callable[[_Subject], bool]:
    return lambda x: any(token in x.s for token in tokens)


def _contains_all(*tokens: str) -> Callable[[_Subject], bool]:
    return lambda x: all(token in x.s for token in tokens)


def _starts_with(*prefixes: str) -> Callable[[_Subject], bool]:
    return lambda x: x.s.startswith(prefixes)


def _word(token: str) -> Callable[[_Subject], bool]:
    pattern = re.compile(rf"\b{re.escape(token)}\b")
    return lambda x: pattern.search(x.s) is not None


def _either(*predicates: Callable[[_Subject], bool]) -> Callable[[_Subject], bool]:
    return lambda x: any(p(x) for p in predicates)


def _both(*predicates: Callable[[_Subject], bool]) -> Callable[[_Subject], bool]:
    return lambda x: all(p(x) for p in predicates)


_is_wolf_rayet = _either(_contains("wolf-rayet"), _starts_with("w "))
_is_carbon = _either(_contains("carbon"), _starts_with("c ", "c-"))
_WHITE_DWARF_CODE = re.compile(r"\b(dav|daz|dao|dab|da|dbv|dbz|db|dov|do|dq|dcv|dc|dx|d)\b", re.IGNORECASE)
_MAIN_SEQUENCE = re.compile(r"^([obafgkmlty])\s", re.IGNORECASE)
_SPECTRAL_TYPE = re.compile(r"([obafgkmlty])-type", re.IGNORECASE)


def _is_white_dwarf(x: _Subject) -> bool:
    return "white dwarf" in x.s or (x.s.startswith("d") and "dwarf" not in x.s)


def _white_dwarf_label(x: _Subject) -> str:
    code = _WHITE_DWARF_CODE.search(x.s)
    return f"White Dwarf {code.group(1).upper()}-Class" if code else "White Dwarf D-Class"


def _spectral_label(pattern: re.Pattern) -> Callable[[_Subject], str]:
    return lambda x: f"{pattern.search(x.s).group(1).upper()}-Class"


STAR_CLASS_RULES: tuple[ClassRule, ...] = (
    # Journal codes ("K", "DAV", "M_RedGiant") go through the star type table
    ClassRule(lambda x: "_" in x.s or " " not in x.s, lambda x: star_type_to_display(x.raw)),
    ClassRule(_contains_all("black hole", "supermassive"), "Supermassive Black Hole"),
    ClassRule(_contains("black hole"), "Black Hole"),
    ClassRule(_contains("neutron"), "Neutron Star"),
    ClassRule(_both(_is_wolf_rayet, _either(_word("wnc"), _both(_word("wn"), _word("wc")))), "Wolf-Rayet WNC-Class"),
    ClassRule(_both(_is_wolf_rayet, _word("wn")), "Wolf-Rayet WN-Class"),
    ClassRule(_both(_is_wolf_rayet, _word("wc")), "Wolf-Rayet WC-Class"),
    ClassRule(_both(_is_wolf_rayet, _word("wo")), "Wolf-Rayet WO-Class"),
    ClassRule(_is_wolf_rayet, "Wolf-Rayet W-Class"),
    ClassRule(_is_white_dwarf, _white_dwarf_label),
    ClassRule(_contains("t tauri", "tts"), "T Tauri TTS-Class"),
    ClassRule(_contains("herbig", "ae/be"), "Herbig Ae/Be-Class"),
    ClassRule(_both(_is_carbon, _contains("chd")), "Carbon CHd-Class"),
    ClassRule(_both(_is_carbon, _contains("ch")), "Carbon CH-Class"),
    ClassRule(_both(_is_carbon, _contains("cj")), "Carbon CJ-Class"),
    ClassRule(_both(_is_carbon, _contains("cn")), "Carbon CN-Class"),
    ClassRule(_both(_is_carbon, _contains("cs", "c-s")), "Carbon CS-Class"),
    ClassRule(_is_carbon, "Carbon C-Class"),
    ClassRule(_either(_starts_with("ms"), _contains("m-s")), "MS-Class"),
    ClassRule(_either(_starts_with("s "), _contains("s-type")), "S-Class"),
    ClassRule(_either(_starts_with("y "), _contains("y-type")), "Y-Type (Brown Dwarf)"),
    ClassRule(_either(_starts_with("l "), _contains("l-type")), "L-Type (Brown Dwarf)"),
    ClassRule(_either(_starts_with("t "), _contains("t-type")), "T-Type (Brown Dwarf)"),
    ClassRule(lambda x: _MAIN_SEQUENCE.search(x.s) is not None, _spectral_label(_MAIN_SEQUENCE)),
    ClassRule(lambda x: _SPECTRAL_TYPE.search(x.s) is not None, _spectral_label(_SPECTRAL_TYPE)),
    ClassRule(_contains("red dwarf"), "M-Class"),
)

PLANET_CLASS_RULES: tuple[ClassRule, ...] = (
    ClassRule(_contains_all("gas giant", "water", "life"), "GGWBL"),
    ClassRule(_contains_all("gas giant", "ammonia", "life"), "GGABL"),
    ClassRule(_contains_all("water giant", "life"), "WGWL"),
    ClassRule(_contains("water giant"), "WG"),
    ClassRule(_contains_all("class i ", "gas"), "C1GG"),
    ClassRule(_contains_all("class ii ", "gas"), "C2GG"),
    ClassRule(_contains_all("class iii ", "gas"), "C3GG"),
    ClassRule(_contains_all("class iv ", "gas"), "C4GG"),
    ClassRule(_contains_all("class v ", "gas"), "C5GG"),
    ClassRule(_both(_contains("helium rich", "helium-rich"), _contains("gas")), "HRGG"),
    ClassRule(_contains_all("helium", "gas"), "HGG"),
    ClassRule(_contains("gas giant"), "GG"),
    ClassRule(_contains("earth-like", "earthlike"), "ELW"),
    ClassRule(_contains("water world"), "WW"),
    ClassRule(_contains("ammonia world"), "AW"),
    ClassRule(_contains_all("high metal", "content"), "HMC"),
    ClassRule(_contains("metal rich", "metal-rich"), "MR"),
    ClassRule(_contains("rocky ice"), "RIB"),
    ClassRule(_contains("rocky"), "RB"),
    ClassRule(_contains("icy"), "IB"),
)


def format_star_class(sub_type: Optional[str]) -> str:
    """Compact label for a star subtype, e.g. "K-Class" or "White Dwarf DA-Class"."""
    if not sub_type or not sub_type.strip():
        return "Star"
    raw = sub_type.strip()
    label = _first_match(STAR_CLASS_RULES, _Subject(raw=raw, s=raw.lower()))
    return label or star_type_to_display(raw) or raw


def format_planet_class(sub_type: Optional[str], is_moon: bool = False) -> str:
    """Compact label for a planet or moon subtype, e.g. "ELW" or "C2GG"."""
    normalized = planet_class_to_display(sub_type.strip() if sub_type else "")
    if not normalized:
        return "Moon" if is_moon else "Planet"
    label = _first_match(PLANET_CLASS_RULES, _Subject(raw=normalized, s=normalized.lower()))
    return label or normalized


def format_body_class(sub_type: Optional[str], body_type: str) -> str:
    if body_type == BodyType.STAR:
        return format_star_class(sub_type)
    if body_type in (BodyType.BELT, BodyType.RING):
        return sub_type.strip() if sub_type and sub_type.strip() else body_type
    return format_planet_class(sub_type, is_moon=body_type == BodyType.MOON)
