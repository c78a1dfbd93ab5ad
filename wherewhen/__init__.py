"""WhereWhen event availability and attendance engine."""

__version__ = "1.0.0"
