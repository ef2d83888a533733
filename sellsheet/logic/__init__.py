"""Core business logic layer.

Subpackages:
- profit: the profit analysis engine and the per-state calculation summary
- reporting: currency / percentage formatting for screens and exports
- state: pure editing operations on the calculator state
"""
__all__ = ["profit", "reporting", "state"]
