from epd_birdy.compute import evaluate_reference_value
from epd_birdy.config import EvaluationConfig, ValidationPolicy, get_evaluation_config
from epd_birdy.epd import (
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField,
    IndicatorRecord,
    LifeCyclePhase,
    QuantityType,
)
from epd_birdy.errors import (
    EvaluationError,
    InvalidReferenceValue,
    MissingEPD,
    MissingOrZeroQuantityTypeValue,
)
from epd_birdy.notes import LoggingSink, RecordingSink
from epd_birdy.processor import epds_from_frame, evaluation_breakdown, export_breakdown, read_epd_data
from epd_birdy.query import get_epd_quantity_type, get_evaluation_value, phases_match

__all__ = [
    'evaluate_reference_value', 'get_evaluation_value', 'get_epd_quantity_type', 'phases_match',
    'EnvironmentalProductDeclaration', 'EnvironmentalProductDeclarationField', 'IndicatorRecord',
    'LifeCyclePhase', 'QuantityType',
    'EvaluationError', 'MissingEPD', 'InvalidReferenceValue', 'MissingOrZeroQuantityTypeValue',
    'EvaluationConfig', 'ValidationPolicy', 'get_evaluation_config',
    'LoggingSink', 'RecordingSink',
    'read_epd_data', 'epds_from_frame', 'evaluation_breakdown', 'export_breakdown',
]
