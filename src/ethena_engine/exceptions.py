"""Exceptions raised by the calculation engine.

Only invalid arguments are signalled with exceptions. Zero denominators that
occur naturally in a live system (empty vault, no spot exposure, no season
sats) return documented fallback values instead.
"""


class EngineError(Exception):
    """Base exception for all engine errors."""


class InvalidArgumentError(EngineError, ValueError):
    """Raised when an input is outside the domain of a calculation.

    Subclasses ValueError so callers that already guard numeric parsing
    with ``except ValueError`` keep working.
    """
