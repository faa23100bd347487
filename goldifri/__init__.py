"""Goldilocks field arithmetic, quadratic extensions and FRI query-evaluation helpers."""

__version__ = "0.1.0"
__all__ = ["field", "range_checks", "extension", "algebra", "oracles", "evaluation"]