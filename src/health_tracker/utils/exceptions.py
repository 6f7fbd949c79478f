"""Custom exceptions for the health tracker."""


class HealthTrackerError(Exception):
    """Base exception for all health tracker errors."""

    pass


class ConfigurationError(HealthTrackerError):
    """Raised when there is a configuration error."""

    pass


class StorageError(HealthTrackerError):
    """Raised when a persisted slot cannot be read or written."""

    pass


class ValidationError(HealthTrackerError):
    """Raised when user input or an operation argument is rejected."""

    pass


class ExportError(HealthTrackerError):
    """Raised when writing an export file fails."""

    pass
