"""Recency exception hierarchy.

Keep this module small and dependency-free: the container itself never raises,
so these only surface at the config and serialization boundaries.
"""


class RecencyError(Exception):
    """Base exception for all recency errors."""


class RecencyConfigError(RecencyError):
    """Raised for invalid configuration files."""


class RecencyFormatError(RecencyError):
    """Raised when serialized data is malformed or incompatible."""
