"""Custom exceptions for Object Tracker"""


class ObjectTrackerError(Exception):
    """Base exception for Object Tracker"""
    pass


class DimensionError(ObjectTrackerError, ValueError):
    """Raised when matrix operands have incompatible shapes.

    Shapes are fixed by the filter model, so this signals a programming
    error rather than bad input data. Nothing in the package catches it.
    """
    pass


class ConfigurationError(ObjectTrackerError):
    """Raised when configuration is invalid"""
    pass


class InputFormatError(ObjectTrackerError, ValueError):
    """Raised when driver input lines cannot be parsed"""
    pass
