"""
Exception types raised by the engine.
"""
from __future__ import annotations


class ConfigError(ValueError):
    """A configuration value lies outside its declared domain."""


class InvariantViolation(RuntimeError):
    """
    A caller broke an engine precondition (e.g. moving after a leaf was reached).

    These signal a bug in the orchestration layer and are never recovered from.
    """
