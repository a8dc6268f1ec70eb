"""Prometheus metrics for monitoring simulation volume and product mix"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "loan_simulation_total",
    "Total loan simulations requested",
    ["outcome"],  # simulated | no_product
)

simulation_product_counter = Counter(
    "loan_simulation_product_total",
    "Simulations quoted per product",
    ["product"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(product_code: int) -> None:
    """Record a quoted simulation and the product that served it"""
    simulation_counter.labels(outcome="simulated").inc()
    simulation_product_counter.labels(product=str(product_code)).inc()


def record_no_product() -> None:
    """Record a request that no product admitted"""
    simulation_counter.labels(outcome="no_product").inc()
