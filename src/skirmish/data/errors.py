"""Custom exceptions for data loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a JSON file is missing, unreadable or not valid JSON."""


class DataValidationError(DataError):
    """Raised when JSON content does not describe valid species or actions."""
