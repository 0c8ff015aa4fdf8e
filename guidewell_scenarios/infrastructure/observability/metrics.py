"""Prometheus metrics for monitoring calculation volume, failures and strategy outcomes"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "scenario_calculation_total",
    "Total scenario calculations served",
    ["kind"],  # payoff | strategy | growth | emergency_fund | baseline | trajectory | summary
)

calculation_error_counter = Counter(
    "scenario_calculation_errors_total",
    "Calculations that failed, by error type",
    ["kind", "error"],
)

strategy_recommendation_counter = Counter(
    "debt_strategy_recommendation_total",
    "Debt strategy recommendations issued",
    ["strategy"],  # snowball | avalanche
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(kind: str) -> None:
    calculation_counter.labels(kind=kind).inc()


def record_calculation_error(kind: str, error: Exception) -> None:
    calculation_error_counter.labels(kind=kind, error=type(error).__name__).inc()


def record_recommendation(strategy: str) -> None:
    strategy_recommendation_counter.labels(strategy=strategy).inc()
