import math

from epd_birdy import notes
from epd_birdy.config import DEFAULT_CONFIG
from epd_birdy.errors import InvalidReferenceValue, MissingEPD, MissingOrZeroQuantityTypeValue
from epd_birdy.query import get_epd_quantity_type, get_evaluation_value, matching_records


def _unusable(value):
    return value is None or not math.isfinite(value)


def validate_inputs(reference_value, epd, sink, config):
    if epd is None:
        message = "No EPD provided. Please provide a reference EPD."
        sink.record_error(message)
        raise MissingEPD(message)

    # None, NaN and infinity have no lenient fallback
    unusable = _unusable(reference_value)
    if unusable or reference_value <= 0:
        message = "No evaluation value was found within the EPD. Please try another."
        sink.record_error(message)
        if config.strict or unusable:
            raise InvalidReferenceValue(f"{message} Reference value was {reference_value}.")


def declared_quantity(epd, sink):
    qt_value = epd.quantity_type_value
    if _unusable(qt_value) or qt_value <= 0:
        message = (f"EPD {epd.name} declares a QuantityTypeValue of {qt_value}. "
                   f"A positive value is required to scale the reference value.")
        sink.record_error(message)
        raise MissingOrZeroQuantityTypeValue(message)
    return qt_value


def evaluate_reference_value(reference_value, epd, field, phases, exact_match=False,
                             sink=None, config=None):
    """
    Scale the impact an EPD declares for its functional unit to a different
    quantity of the same product.

    The reference value is multiplied by the selected field metric found
    within the EPD (summed over the requested phases) and divided by the
    EPD's QuantityTypeValue. Results rely on the caller supplying a reference
    value in the same unit as the EPD's declared quantity.

    Parameters:
    - reference_value: amount, quantity or value to evaluate against the EPD
    - epd: EnvironmentalProductDeclaration to evaluate against
    - field: EnvironmentalProductDeclarationField to read from the EPD
    - phases: life-cycle phases to evaluate; they must be documented in the EPD
    - exact_match: only use records covering exactly the requested phases
    - sink: receives errors, warnings and the provenance note (default: logging)
    - config: EvaluationConfig, STRICT validation by default

    Returns:
    - float: total of the field metric for the reference value
    """
    sink = sink or notes.default_sink
    config = config or DEFAULT_CONFIG

    validate_inputs(reference_value, epd, sink, config)

    epd_value = get_evaluation_value(epd, field, phases, exact_match)
    if config.warn_on_unmatched and not matching_records(epd, phases, exact_match):
        sink.record_warning(f"No indicator record of {epd.name} matches the requested phases; "
                            f"the evaluation value is 0.")

    qt_value = epd.quantity_type_value
    qt = get_epd_quantity_type(epd)

    sink.record_note(f"Result is created by multiplying the ReferenceValue of {reference_value} "
                     f"by the units of {qt} QuantityType extracted from {epd.name} "
                     f"divided by {qt_value}.")

    qt_value = declared_quantity(epd, sink)
    return (reference_value * epd_value) / qt_value
