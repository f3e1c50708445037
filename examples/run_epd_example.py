import logging

import pandas as pd

from epd_birdy import EnvironmentalProductDeclarationField, evaluate_reference_value, evaluation_breakdown
from epd_birdy.processor import epds_from_frame, export_breakdown

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

# Same layout read_epd_data expects from an Excel sheet
table = pd.DataFrame({
    'EPD Name': ['Ready-mix concrete C30/37'] * 4,
    'Quantity Type': ['Volume'] * 4,
    'Quantity Type Value': [1.0] * 4,
    'Phases': ['A1, A2, A3', 'A4', 'C1, C2, C3, C4', 'D'],
    'GWP': [250.0, 8.0, 12.0, -20.0],
})

epd = epds_from_frame(table)['Ready-mix concrete C30/37']
phases = ["A1", "A2", "A3", "A4"]
field = EnvironmentalProductDeclarationField.GLOBAL_WARMING_POTENTIAL

result = evaluate_reference_value(12.5, epd, field, phases)
df = evaluation_breakdown(12.5, epd, field, phases)
print(df)
export_breakdown(df, "epd_breakdown.xlsx")
print(f"\n🌍 Total Impact: {result:.2f} kg CO2e")
