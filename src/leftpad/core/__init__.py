"""
Core functionality for the leftpad application.

This package contains the padding function, the interactive session state,
command processing and exception handling.
"""
from leftpad.core.commands import Command, CommandManager
from leftpad.core.completer import CommandCompleter
from leftpad.core.exceptions import (ConfigurationError, InvalidArgumentError,
                                     LeftpadError)
from leftpad.core.padder import leftpad, to_text
from leftpad.core.session import PadSession

__all__ = [
    'leftpad',
    'to_text',
    'PadSession',
    'CommandManager',
    'Command',
    'CommandCompleter',
    'LeftpadError',
    'InvalidArgumentError',
    'ConfigurationError',
]
