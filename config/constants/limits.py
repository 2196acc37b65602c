"""
==========================================================
LIMITS & THRESHOLDS
==========================================================
Numeric thresholds used by logging and diagnostics.
Change once here → applies everywhere.
"""

# --- Request Logging ---
SLOW_REQUEST_MS = 2000          # requests slower than this are flagged

# --- Employee API ---
API_HEALTH_SLOW_MS = 1000       # healthcheck warns above this latency
