from epd_birdy.epd import EnvironmentalProductDeclarationField, LifeCyclePhase
from epd_birdy.errors import MissingEPD


def phases_match(record_phases, phases, exact_match=False):
    """
    Exact match: the record covers exactly the requested phases.
    Otherwise: the record shares at least one phase with the request.
    """
    record_phases = frozenset(record_phases)
    phases = frozenset(phases)
    if exact_match:
        return record_phases == phases
    return not record_phases.isdisjoint(phases)


def requested_phases(phases):
    requested = frozenset(LifeCyclePhase.parse(p) for p in phases)
    if not requested:
        raise ValueError("At least one life-cycle phase must be requested.")
    return requested


def matching_records(epd, phases, exact_match=False):
    if epd is None:
        raise MissingEPD("No EPD provided. Please provide a reference EPD.")
    requested = requested_phases(phases)
    return [r for r in epd.records if phases_match(r.phases, requested, exact_match)]


def get_evaluation_value(epd, field, phases, exact_match=False):
    """
    Sum the value of `field` over every indicator record of the EPD whose
    phases qualify. Records without the field contribute 0; no qualifying
    record gives 0.
    """
    field = EnvironmentalProductDeclarationField.parse(field)
    total = 0.0
    for record in matching_records(epd, phases, exact_match):
        total += record.value(field)
    return total


def get_epd_quantity_type(epd):
    if epd is None:
        raise MissingEPD("No EPD provided. Please provide a reference EPD.")
    return epd.quantity_type
