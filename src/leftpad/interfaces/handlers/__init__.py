"""
Command handlers package for the leftpad CLI interface.

This package contains individual command handlers that implement
the Command Handler pattern for better separation of concerns.
"""

from leftpad.interfaces.handlers.configuration import ConfigurationHandler
from leftpad.interfaces.handlers.padding import PaddingHandler

__all__ = [
    'ConfigurationHandler',
    'PaddingHandler',
]
