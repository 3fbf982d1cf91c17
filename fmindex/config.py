# Suffix array construction strategies accepted by build_suffix_array.
SUFFIX_ARRAY_METHODS = ("naive", "doubling")
DEFAULT_SUFFIX_ARRAY_METHOD = "doubling"

# Display only; the sentinel is never an alphabet value.
SENTINEL_GLYPH = "$"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
