"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class InvocationError(BaseAppError):
    """Exception raised for malformed command invocations."""

    pass


class LaunchError(BaseAppError):
    """Exception raised when the native launcher cannot spawn a process at all."""

    pass
