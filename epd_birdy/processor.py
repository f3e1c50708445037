import logging
import re

import pandas as pd

from epd_birdy.compute import declared_quantity, validate_inputs
from epd_birdy.config import DEFAULT_CONFIG
from epd_birdy.epd import (
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField,
    IndicatorRecord,
    LifeCyclePhase,
)
from epd_birdy import notes
from epd_birdy.query import requested_phases, phases_match

logger = logging.getLogger(__name__)

REQUIRED_COLS = ['EPD Name', 'Quantity Type', 'Quantity Type Value', 'Phases']


def _parse_phases(raw):
    return [LifeCyclePhase.parse(p) for p in re.split(r"[,;]", str(raw)) if p.strip()]


def _field_columns(columns):
    fields = {}
    for col in columns:
        if col in REQUIRED_COLS:
            continue
        try:
            fields[col] = EnvironmentalProductDeclarationField.parse(col)
        except ValueError:
            logger.debug("Ignoring column %r: not an EPD field", col)
    return fields


def epds_from_frame(df):
    """
    Builds EPDs from a table with one row per indicator record.
    Expected columns: EPD Name, Quantity Type, Quantity Type Value, Phases,
    plus one column per indicator field (e.g. GWP, GlobalWarmingPotential).
    Rows sharing an EPD Name belong to the same EPD.
    """
    if not all(col in df.columns for col in REQUIRED_COLS):
        raise ValueError(f"EPD table must contain columns: {REQUIRED_COLS}")

    fields = _field_columns(df.columns)
    epds = {}

    for idx, row in df.iterrows():
        if pd.isna(row['EPD Name']) or not str(row['EPD Name']).strip():
            logger.warning("Skipping row %s: no EPD Name", idx)
            continue
        name = str(row['EPD Name']).strip()

        if name not in epds:
            qt_value = row['Quantity Type Value']
            try:
                epds[name] = EnvironmentalProductDeclaration(
                    name=name,
                    quantity_type=str(row['Quantity Type']).strip(),
                    quantity_type_value=None if pd.isna(qt_value) else float(qt_value),
                )
            except ValueError as e:
                logger.warning("Skipping row %s of %s: %s", idx, name, e)
                continue

        try:
            phases = _parse_phases(row['Phases'])
        except ValueError as e:
            logger.warning("Skipping row %s of %s: %s", idx, name, e)
            continue

        # Blank cells are left out so they read as 0
        metrics = {}
        for col, field in fields.items():
            if pd.isna(row[col]):
                continue
            try:
                metrics[field] = float(row[col])
            except (TypeError, ValueError):
                logger.warning("Ignoring %s in row %s of %s: not a number (%r)", col, idx, name, row[col])
        epds[name].add_record(IndicatorRecord(phases, metrics))

    return epds


def read_epd_data(filepath):
    """
    Reads EPD indicator records from an Excel file.
    Returns a dictionary {epd_name: EnvironmentalProductDeclaration}.
    """
    df = pd.read_excel(filepath)
    epds = epds_from_frame(df)
    logger.debug("Read %d EPDs from %s", len(epds), filepath)
    return epds


def evaluation_breakdown(reference_value, epd, field, phases, exact_match=False, sink=None):
    """
    Per-record view of an evaluation.

    Parameters:
    - reference_value, epd, field, phases, exact_match, sink: as evaluate_reference_value

    Returns:
    - DataFrame with one row per indicator record. The Scaled Value column
      sums to the result of evaluate_reference_value for the same inputs.
    """
    sink = sink or notes.default_sink
    validate_inputs(reference_value, epd, sink, DEFAULT_CONFIG)
    qt_value = declared_quantity(epd, sink)

    field = EnvironmentalProductDeclarationField.parse(field)
    requested = requested_phases(phases)

    rows = []
    for record in epd.records:
        matched = phases_match(record.phases, requested, exact_match)
        value = record.value(field)
        rows.append({
            "EPD Name": epd.name,
            "Phases": ", ".join(sorted(p.value for p in record.phases)),
            "Matched": matched,
            "Field": field.value,
            "Value": value,
            "Scaled Value": reference_value * value / qt_value if matched else 0.0,
        })

    return pd.DataFrame(rows, columns=["EPD Name", "Phases", "Matched", "Field", "Value", "Scaled Value"])


def export_breakdown(df, filepath):
    df.to_excel(filepath, sheet_name="Breakdown", index=False, engine="openpyxl")
    logger.info("Breakdown saved to: %s", filepath)
