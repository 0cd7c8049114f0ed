"""Oracle SQL data types: timestamps, intervals, type descriptors, collection iterators and conversions."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "interval_ym",
    "timestamp",
    "interval_ds",
    "collection",
    "oracle_type",
    "conversions",
]