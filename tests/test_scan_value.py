import pytest

from systemmap.bodies import CelestialBodyRecord
from systemmap.scan_value import (
    DEFAULT_BASE_SCAN_VALUE,
    DSS_MAPPING_MULTIPLIER,
    FIRST_DISCOVERY_MULTIPLIER,
    FIRST_MAPPED_MULTIPLIER,
    MAPPED_SCAN_TYPE,
    base_scan_value,
    calculate_scan_value,
    estimate_fss_value,
    estimate_scan_value,
    terraform_bonus,
)


class TestBaseValues:
    @pytest.mark.parametrize(
        "sub_type, expected",
        [
            ("Earthlike body", 270000),
            ("Water world", 99000),
            ("Sudarsky class II gas giant", 28000),
            ("Rocky body", 500),
            ("K", 2911),
            ("K (Yellow-Orange) Star", 2911),
            ("Neutron Star", 22000),
            ("White Dwarf (DA) Star", 14000),
            ("DAV", 14000),
            ("Something exotic", DEFAULT_BASE_SCAN_VALUE),
            (None, DEFAULT_BASE_SCAN_VALUE),
        ],
    )
    def test_base_scan_value(self, sub_type, expected):
        assert base_scan_value(sub_type) == expected

    def test_terraform_bonus(self):
        assert terraform_bonus("Water world") == 169000
        assert terraform_bonus("High metal content body") == 149000
        assert terraform_bonus("Earthlike body") is None
        assert terraform_bonus(None) is None


class TestCalculateScanValue:
    def test_first_discovery_and_mapping(self):
        result = calculate_scan_value(
            "Water world", terraformable=True, was_discovered=False, was_mapped=False, is_mapped=True
        )

        assert result.base_value == 99000
        assert result.terraform_bonus == 169000
        assert result.subtotal == 268000
        assert result.discovery_multiplier == FIRST_DISCOVERY_MULTIPLIER
        assert result.mapping_multiplier == pytest.approx(DSS_MAPPING_MULTIPLIER * FIRST_MAPPED_MULTIPLIER)
        assert result.final_value == pytest.approx(268000 * 1.5 * 3.33 * 1.5, abs=1)

    def test_already_discovered_not_mapped(self):
        result = calculate_scan_value(
            "Rocky body", terraformable=False, was_discovered=True, was_mapped=False, is_mapped=False
        )
        assert result.terraform_bonus == 0
        assert result.final_value == 500

    def test_mapped_after_someone_else(self):
        result = calculate_scan_value(
            "Metal rich body", terraformable=False, was_discovered=True, was_mapped=True, is_mapped=True
        )
        assert result.mapping_multiplier == DSS_MAPPING_MULTIPLIER
        assert result.final_value == pytest.approx(31000 * 3.33, abs=1)

    def test_bonus_requires_terraformable(self):
        result = calculate_scan_value(
            "Water world", terraformable=False, was_discovered=True, was_mapped=False, is_mapped=False
        )
        assert result.terraform_bonus == 0
        assert result.subtotal == 99000


class TestEstimates:
    def test_estimate_fss_value(self):
        assert estimate_fss_value("Rocky body", terraformable=True, body_type="Planet") == 193500
        assert estimate_fss_value("Icy body", terraformable=False, body_type="Moon") == 750
        assert estimate_fss_value("Metal Rich", terraformable=False, body_type="Belt") == 0

    @pytest.mark.parametrize(
        "sub_type, expected",
        [("M (Red dwarf) star", 4331), ("K", 4367), ("G", 4385)],
    )
    def test_half_credits_round_up(self, sub_type, expected):
        """Base values ending in an odd digit give half credits after the discovery bonus"""
        assert estimate_fss_value(sub_type, terraformable=False, body_type="Star") == expected
        result = calculate_scan_value(
            sub_type, terraformable=False, was_discovered=False, was_mapped=False, is_mapped=False
        )
        assert result.final_value == expected

    def test_stored_value_wins(self):
        body = CelestialBodyRecord(body_id=3, name="Sol 3", sub_type="Icy body", scan_value=1234)
        assert estimate_scan_value(body) == 1234

    @pytest.mark.parametrize("body_type", ["Belt", "Ring"])
    def test_belts_and_rings_are_worthless(self, body_type):
        body = CelestialBodyRecord(body_id=10, name="Sol A Belt", body_type=body_type, sub_type="Rocky")
        assert estimate_scan_value(body) == 0

    def test_estimate_from_scan_state(self):
        discovered = CelestialBodyRecord(body_id=3, name="Sol 3", sub_type="Icy body", was_discovered=True)
        mapped = CelestialBodyRecord(
            body_id=3,
            name="Sol 3",
            sub_type="Icy body",
            was_discovered=True,
            was_mapped=True,
            scan_type=MAPPED_SCAN_TYPE,
        )
        first = CelestialBodyRecord(body_id=3, name="Sol 3", sub_type="Icy body", scan_type=MAPPED_SCAN_TYPE)

        assert estimate_scan_value(discovered) == 500
        assert estimate_scan_value(mapped) == pytest.approx(500 * 3.33, abs=1)
        assert estimate_scan_value(first) == pytest.approx(500 * 1.5 * 3.33 * 1.5, abs=1)
