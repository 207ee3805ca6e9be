"""Utility functions for the transform utilities."""
from .workers import resolve_workers
from .mappings import canonical_interpolation, interpolation_to_cv

__all__ = ["resolve_workers", "canonical_interpolation", "interpolation_to_cv"]
