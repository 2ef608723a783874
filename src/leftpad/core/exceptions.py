"""
Custom exceptions for the leftpad application.

This module defines specific exception types for better error handling
and user feedback throughout the application.
"""


class LeftpadError(Exception):
    """Base exception class for all leftpad-specific errors."""
    pass


class InvalidArgumentError(LeftpadError):
    """Exception raised when an argument cannot be used for padding."""
    
    def __init__(self, message: str, argument: str = None, value=None):
        super().__init__(message)
        self.argument = argument
        self.value = value
        
    def __str__(self):
        base_msg = super().__str__()
        if self.argument:
            base_msg += f" (Argument: {self.argument})"
        if self.value is not None:
            base_msg += f" (Value: {self.value!r})"
        return base_msg


class ConfigurationError(LeftpadError):
    """Exception raised when a session setting is invalid."""
    
    def __init__(self, message: str, setting: str = None):
        super().__init__(message)
        self.setting = setting
        
    def __str__(self):
        base_msg = super().__str__()
        if self.setting:
            base_msg += f" (Setting: {self.setting})"
        return base_msg
