# src/usfm_kit/observability/names.py

"""Standard metric names for usfm-kit observability.

Use these constants instead of hardcoded strings so parser and formatter
metrics stay consistent.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
USFM_PARSE_DURATION = "usfm_parse_duration"

# Counters
USFM_DOCUMENTS_PARSED_TOTAL = "usfm_documents_parsed_total"
USFM_PARSE_ERRORS_TOTAL = "usfm_parse_errors_total"
USFM_LINES_TOTAL = "usfm_lines_total"
# Labelled with reason: "invalid_marker" or "unknown_marker"
USFM_MARKERS_SKIPPED_TOTAL = "usfm_markers_skipped_total"


# ============================================================================
# Formatter Metrics
# ============================================================================

# Duration (labelled with formatter name)
FORMAT_DURATION = "format_duration"

# Counters
FORMAT_DOCUMENTS_TOTAL = "format_documents_total"
