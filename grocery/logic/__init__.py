"""Core business logic layer.

Subpackages:
- units: unit vocabulary and conversion to base units
- shopping: aggregating and scaling grocery lists
- pricing: cheapest product matching and cost estimation
"""
__all__ = ["units", "shopping", "pricing", "matching"]
