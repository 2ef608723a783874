"""
leftpad - pad strings and numbers on the left to a minimum width.
"""
from leftpad.core.exceptions import (ConfigurationError, InvalidArgumentError,
                                     LeftpadError)
from leftpad.core.padder import leftpad, to_text

__version__ = "0.1.0"

__all__ = [
    'leftpad',
    'to_text',
    'LeftpadError',
    'InvalidArgumentError',
    'ConfigurationError',
]
