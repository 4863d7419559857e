"""Prometheus metrics definitions"""

from prometheus_client import Counter, Gauge


commands_executed = Counter(
    'commands_executed_total',
    'Number of commands executed',
    labelnames=['command', 'status']  # success, failure
)

transactions_stored = Gauge(
    'transactions_stored',
    'Number of transactions currently in the book'
)

persons_stored = Gauge(
    'persons_stored',
    'Number of staff records currently in the book'
)

storage_saves = Counter(
    'storage_saves_total',
    'Number of data file saves',
    labelnames=['status']
)


def record_command(command: str, success: bool) -> None:
    """Count a command execution"""
    commands_executed.labels(command=command, status='success' if success else 'failure').inc()


def update_store_gauges(transaction_count: int, person_count: int) -> None:
    """Refresh the book size gauges"""
    transactions_stored.set(transaction_count)
    persons_stored.set(person_count)
