"""
Configuration and constants for the 1D acceleration processing pipeline.
Adjust these to match your logger export and the sheet layout you want.
"""

# Standard gravity (m/s²). Raw acceleration is logged in g.
GRAVITY_MS2 = 9.81

# Name of the sheet created for every processing run.
OUTPUT_SHEET_NAME = "acc-processed"

# Persisted variables (flat JSON object, one string value per key).
DEFAULT_SETTINGS_FILE = "acc_variables.json"

# Keys kept identical to the spreadsheet document properties.
SETTINGS_KEYS = (
    "dataSheet",
    "unixTime",
    "logSample",
    "accX",
    "accY",
    "accZ",
    "shiftSampleFrom",
    "shiftSampleTo",
)

# (title, text) shown for each key when variables are captured interactively.
SETTINGS_PROMPTS = {
    "dataSheet": ("Enter name of sheet with logged data", ""),
    "unixTime": ("Enter column id to extract", "Log timestamp in UNIX time"),
    "logSample": ("Enter column id to extract", "Log sample count"),
    "accX": ("Enter column id to extract", "X-axis acceleration"),
    "accY": ("Enter column id to extract", "Y-axis acceleration"),
    "accZ": ("Enter column id to extract", "Z-axis acceleration"),
    "shiftSampleFrom": ("Enter row number", "For the start cell in order to sample for the baseline shift"),
    "shiftSampleTo": ("Enter row number", "For the end cell in order to sample for the baseline shift"),
}

# Output sheet layout (1-based column numbers). Raw columns land in A-E in this order.
RAW_COLUMNS = ("unix_time", "log_sample", "acc_x", "acc_y", "acc_z")

COL_ELAPSED_TIME = 6
COL_SHIFT_VALUE = 7
COL_COMPENSATED_INVERTED = 8
COL_SHIFTED = 9
COL_DELTA_T = 11
COL_INTEGRAL_VELOCITY = 12
COL_VELOCITY = 13
COL_INTEGRAL_DISPLACEMENT = 14
COL_DISPLACEMENT = 15
COL_INSIGHT_ANCHOR = 17

# Derived column -> (sheet column, header written in row 1).
DERIVED_COLUMN_LAYOUT = {
    "elapsed_time": (COL_ELAPSED_TIME, "loggingElapsedTime"),
    "acc_y_compensated_inverted": (COL_COMPENSATED_INVERTED, "accY-compensated-inverted"),
    "acc_y_shifted": (COL_SHIFTED, "accY-compensated-inverted-shifted"),
    "delta_t": (COL_DELTA_T, "deltaT"),
    "velocity_increment": (COL_INTEGRAL_VELOCITY, "int_v"),
    "velocity": (COL_VELOCITY, "v(t)"),
    "displacement_increment": (COL_INTEGRAL_DISPLACEMENT, "int_d"),
    "displacement": (COL_DISPLACEMENT, "d(t)"),
}
SHIFT_VALUE_HEADER = "shiftValue"

# Charts: first anchored at row 4, column 20 (T4), each next one 20 rows lower.
CHART_ANCHOR_ROW = 4
CHART_ANCHOR_COL = 20
CHART_ROW_STEP = 20

# Synthetic log defaults (demo data when no logger export is at hand).
SYNTHETIC_SAMPLE_RATE_HZ = 10.0
SYNTHETIC_START_UNIX = 1592611200  # 2020-06-20 00:00:00 UTC
SYNTHETIC_SHEET_NAME = "log"
SYNTHETIC_HEADERS = ("timestamp", "sample", "accX", "accY", "accZ")
