# src/http_kit/observability/names.py

"""Standard metric names for http-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
PARSE_DURATION = "http_file_parse_duration"

# Counters
SECTIONS_PARSED = "http_file_sections_parsed"
DIVIDERS_DROPPED = "http_file_dividers_dropped"


# ============================================================================
# Environment Metrics
# ============================================================================

# Duration
ENVIRONMENT_RESOLVE_DURATION = "environment_resolve_duration"

# Counters
ENVIRONMENT_FILES_READ = "environment_files_read"
ENVIRONMENT_FILE_ERRORS_TOTAL = "environment_file_errors_total"


# ============================================================================
# Request Metrics
# ============================================================================

# Duration
REQUEST_DURATION = "http_request_duration"

# Counters
REQUESTS_TOTAL = "http_requests_total"
REQUEST_ERRORS_TOTAL = "http_request_errors_total"
REQUESTS_NOT_FOUND_TOTAL = "http_requests_not_found_total"


# ============================================================================
# Post-script Metrics
# ============================================================================

# Duration
SCRIPT_DURATION = "post_script_duration"

# Counters
SCRIPTS_TOTAL = "post_scripts_total"
SCRIPT_ERRORS_TOTAL = "post_script_errors_total"
SCRIPT_TIMEOUTS_TOTAL = "post_script_timeouts_total"


# ============================================================================
# Collection Metrics
# ============================================================================

# Duration
COLLECTION_SCAN_DURATION = "collection_scan_duration"
