"""Tests for the EPD data model."""

import pytest

from epd_birdy.epd import (
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField,
    IndicatorRecord,
    LifeCyclePhase,
    QuantityType,
)


class TestLifeCyclePhase:
    """Tests for LifeCyclePhase parsing."""

    def test_parse_code(self):
        assert LifeCyclePhase.parse("A1") is LifeCyclePhase.A1
        assert LifeCyclePhase.parse(" c4 ") is LifeCyclePhase.C4

    def test_parse_member(self):
        assert LifeCyclePhase.parse(LifeCyclePhase.D) is LifeCyclePhase.D

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            LifeCyclePhase.parse("E1")


class TestEnvironmentalProductDeclarationField:
    """Tests for field parsing from names and labels."""

    def test_parse_label(self):
        assert EnvironmentalProductDeclarationField.parse("gwp") is \
            EnvironmentalProductDeclarationField.GLOBAL_WARMING_POTENTIAL

    def test_parse_camel_case_name(self):
        assert EnvironmentalProductDeclarationField.parse("AcidificationPotential") is \
            EnvironmentalProductDeclarationField.ACIDIFICATION_POTENTIAL

    def test_parse_enum_name(self):
        assert EnvironmentalProductDeclarationField.parse("EMBODIED_ENERGY") is \
            EnvironmentalProductDeclarationField.EMBODIED_ENERGY

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            EnvironmentalProductDeclarationField.parse("Notes")


class TestQuantityType:
    """Tests for QuantityType."""

    def test_parse(self):
        assert QuantityType.parse("mass") is QuantityType.MASS
        assert QuantityType.parse("Area") is QuantityType.AREA

    def test_str_is_label(self):
        assert str(QuantityType.VOLUME) == "Volume"


class TestIndicatorRecord:
    """Tests for IndicatorRecord."""

    def test_phases_are_frozen(self):
        record = IndicatorRecord(["A1", "A2", "A1"], {"GWP": 1})
        assert record.phases == frozenset({LifeCyclePhase.A1, LifeCyclePhase.A2})

    def test_missing_field_is_zero(self):
        record = IndicatorRecord(["A1"], {"GWP": 3})
        assert record.value(EnvironmentalProductDeclarationField.OZONE_DEPLETION_POTENTIAL) == 0.0

    def test_metric_keys_parsed(self):
        record = IndicatorRecord(["A1"], {"GlobalWarmingPotential": "4.5"})
        assert record.value(EnvironmentalProductDeclarationField.GLOBAL_WARMING_POTENTIAL) == 4.5


class TestEnvironmentalProductDeclaration:
    """Tests for EnvironmentalProductDeclaration."""

    def test_create(self, concrete_epd):
        assert concrete_epd.quantity_type is QuantityType.VOLUME
        assert len(concrete_epd.records) == 4
        assert "Ready-mix concrete" in repr(concrete_epd)

    def test_add_record_rejects_other_types(self):
        epd = EnvironmentalProductDeclaration("Glass", "Area", 1)
        with pytest.raises(ValueError):
            epd.add_record({"phases": ["A1"]})
