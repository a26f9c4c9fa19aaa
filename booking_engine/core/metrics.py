"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry, generate_latest

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

quotes_calculated = Counter(
    'quotes_calculated_total',
    'Total price quotes calculated',
    ['vehicle'],
    registry=registry
)

auth_rejections = Counter(
    'auth_rejections_total',
    'Total requests rejected for a missing or invalid API key',
    registry=registry
)

db_connected = Gauge(
    'db_connected',
    'Database reachability at the last health probe (1=reachable, 0=unreachable)',
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    return generate_latest(registry).decode('utf-8')
