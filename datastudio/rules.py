"""
Fixed format rules shared by the codecs.

Nothing here is configurable at runtime; see config.py for the knobs that are.
"""

CSV_DELIMITER = ","
CSV_QUOTE = '"'
CSV_LINE_TERMINATOR = "\n"
OUTPUT_ENCODING = "utf-8"

SHEET_TITLE = "TestData"
# openpyxl has no autosize; widths are text length plus this padding
COLUMN_WIDTH_PADDING = 2

JSON_INDENT = 2

SAMPLE_PREFIX = "Sample_"
SAMPLE_MIN = 100
SAMPLE_MAX = 999
