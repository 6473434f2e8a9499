"""
Custom exceptions for the design patterns catalog.
"""


class DesignPatternsError(Exception):
    """Base exception for design pattern catalog errors."""

    pass


class ConfigurationError(DesignPatternsError):
    """Raised when a configuration key or value is invalid."""

    pass


class SingletonError(DesignPatternsError):
    """Raised when a second instance of a singleton class is constructed."""

    pass


class NotConnectedError(DesignPatternsError):
    """Raised when a database operation runs without an open connection."""

    pass


class InvalidPaymentError(DesignPatternsError):
    """Raised when a payment amount is outside the processor's limits."""

    pass


class UnknownVariantError(DesignPatternsError, ValueError):
    """Raised when a factory is asked for a variant it does not know."""

    pass


class PatternNotFoundError(DesignPatternsError):
    """Raised when the demo runner cannot resolve a pattern name."""

    pass
