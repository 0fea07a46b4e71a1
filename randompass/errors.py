"""
randompass.errors
"""


class ValidationError(ValueError):
    """Raised when a generation request cannot be satisfied."""
