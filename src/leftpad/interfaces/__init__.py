"""
Interfaces package for the leftpad application.

This package contains the interactive command line interface and the
command handlers it dispatches to.
"""
from leftpad.interfaces.cli import CliInterface
from leftpad.interfaces.command_handlers import (CommandHandler,
                                                 CommandHandlerRegistry,
                                                 CommandResult)

__all__ = [
    'CliInterface',
    'CommandHandler', 
    'CommandResult', 
    'CommandHandlerRegistry'
]
