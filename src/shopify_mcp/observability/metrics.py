"""Prometheus metrics for the Shopify MCP server.

Cardinality rule: only bounded values are labels. tool_name comes from the
fixed tool catalogue and status from ToolErrorKind (or "success").
"""

import logging

import prometheus_client

logger = logging.getLogger(__name__)

# --- Metric singletons (created on first access) ---

_metrics = {}


def _metric(name, metric_type, description, labelnames=()):
    """Get or create a Prometheus metric."""
    if name in _metrics:
        return _metrics[name]
    cls = getattr(prometheus_client, metric_type)
    m = cls(name, description, labelnames=labelnames)
    _metrics[name] = m
    return m


def tool_calls_total():
    return _metric(
        "shopify_tool_calls_total",
        "Counter",
        "Total tool calls",
        labelnames=["tool_name", "status"],
    )


def tool_call_duration():
    return _metric(
        "shopify_tool_call_duration_seconds",
        "Histogram",
        "Tool call duration in seconds",
        labelnames=["tool_name", "status"],
    )


# --- Helper functions for recording metrics ---

def record_tool_call(tool_name: str, status: str, duration: float):
    tool_calls_total().labels(tool_name=tool_name, status=status).inc()
    tool_call_duration().labels(tool_name=tool_name, status=status).observe(duration)


def start_metrics_server(port: int):
    """Expose /metrics over HTTP on ``port`` in a background thread."""
    prometheus_client.start_http_server(port)
    logger.info("Prometheus metrics available on port %d", port)
