"""Scope rules, filters, queues, endpoint extraction, output fields and storage helpers for web crawlers."""

__version__ = "0.1.0"

__all__ = [
    "custom_fields",
    "domains",
    "endpoints",
    "extensions",
    "fields",
    "filters",
    "formfields",
    "options",
    "queue",
    "scope",
    "storage",
    "urls",
]