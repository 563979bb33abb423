# src/embed_verify/observability/names.py

"""Standard metric names for embed-verify observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Encoder Metrics
# ============================================================================

# Duration
ENCODER_LOAD_DURATION = "encoder_load_duration"
ENCODE_DURATION = "encode_duration"

# Counters
ENCODE_REQUESTS_TOTAL = "encode_requests_total"
ENCODER_LOADS_TOTAL = "encoder_loads_total"

# Gauges
EMBEDDING_DIMENSION = "embedding_dimension"


# ============================================================================
# Image Fetch Metrics
# ============================================================================

# Duration
IMAGE_FETCH_DURATION = "image_fetch_duration"

# Counters
IMAGE_FETCH_TOTAL = "image_fetch_total"
IMAGE_FETCH_ERRORS_TOTAL = "image_fetch_errors_total"


# ============================================================================
# Verification Metrics
# ============================================================================

# Duration
VERIFICATION_DURATION = "verification_duration"

# Counters
VERIFICATION_CHECKS_TOTAL = "verification_checks_total"
VERIFICATION_VIOLATIONS_TOTAL = "verification_violations_total"
VERIFICATION_ERRORS_TOTAL = "verification_errors_total"
