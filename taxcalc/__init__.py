"""Dated money records, yearly aggregation and STS tax calculations."""

__version__ = "0.1.0"
__all__ = ["money", "sts"]