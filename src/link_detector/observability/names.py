# src/link_detector/observability/names.py

"""Standard metric names for link-detector observability.

Use these constants instead of hardcoded strings when reporting to a
MetricsHook.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Detection Metrics
# ============================================================================

# Duration
DETECTION_DURATION = "detection_duration"

# Counters
DETECTION_REQUESTS_TOTAL = "detection_requests_total"
DETECTION_FRAGMENTS_CREATED = "detection_fragments_created"
DETECTION_LINKS_FOUND = "detection_links_found"

# Gauges
DETECTION_INPUT_LENGTH = "detection_input_length"
