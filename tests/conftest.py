import pytest

from epd_birdy.epd import (
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField,
    IndicatorRecord,
    LifeCyclePhase,
)
from epd_birdy.notes import RecordingSink

GWP = EnvironmentalProductDeclarationField.GLOBAL_WARMING_POTENTIAL


@pytest.fixture
def single_record_epd():
    """EPD with one A1 record, GWP=5, declared per 2 kg."""
    return EnvironmentalProductDeclaration(
        name="Steel rebar",
        quantity_type="Mass",
        quantity_type_value=2,
        records=[IndicatorRecord([LifeCyclePhase.A1], {GWP: 5})],
    )


@pytest.fixture
def concrete_epd():
    """EPD reporting A1-A3 together plus separate A4, C1-C4 and D records."""
    return EnvironmentalProductDeclaration(
        name="Ready-mix concrete C30/37",
        quantity_type="Volume",
        quantity_type_value=1,
        records=[
            IndicatorRecord(["A1", "A2", "A3"], {"GWP": 250.0, "AP": 0.6}),
            IndicatorRecord(["A4"], {"GWP": 8.0}),
            IndicatorRecord(["C1", "C2", "C3", "C4"], {"GWP": 12.0, "AP": 0.05}),
            IndicatorRecord(["D"], {"GWP": -20.0}),
        ],
    )


@pytest.fixture
def sink():
    return RecordingSink()
