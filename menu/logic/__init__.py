"""Core business logic layer.

Subpackages:
- selection: randomizer and the in-memory selection store
- timing: meal time buckets and the themes keyed on them
"""
__all__ = ["selection", "timing"]
