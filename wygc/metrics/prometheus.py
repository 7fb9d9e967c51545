# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "wygc_requests_total",
    "Total HTTP requests to the service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "wygc_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "wygc_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Upstream Metrics (updated by provider clients) ──
UPSTREAM_REQUESTS = Counter(
    "wygc_upstream_requests_total",
    "Outbound requests to third-party providers",
    ["provider", "operation", "outcome"],
)
UPSTREAM_LATENCY = Histogram(
    "wygc_upstream_request_duration_seconds",
    "Outbound request latency in seconds",
    ["provider", "operation"],
)

# ── Business Metrics (updated by service layer only) ──
ONCALL_LOOKUPS = Counter(
    "wygc_oncall_lookups_total",
    "On-call resolutions performed",
    ["identifier_type", "outcome"],
)
ALERTS_SENT = Counter(
    "wygc_alerts_sent_total",
    "Calls placed through the alert sender",
    ["outcome"],
)
