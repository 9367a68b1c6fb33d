"""
Global constants used throughout the project
"""
import numpy as np


# Sentinel returned by index lookups when the value is absent
NOT_FOUND = -1

# Fixed-width numeric kinds accepted by the numeric utilities.
# Python's int and float stand for the platform's 64-bit kinds.
NUMERIC_KINDS = (
    int,
    float,
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
    np.float32,
    np.float64,
)

DEFAULT_NUMERIC_KIND = int

# Same switch as logging.Formatter: str.format or printf templates
FORMAT_STYLES = ("{", "%")
DEFAULT_FORMAT_STYLE = "{"
