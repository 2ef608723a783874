"""
Command management and processing for the leftpad application.

This module handles command recognition and parsing for the interactive
session, independent of the user interface.
"""
import re
import shlex
from typing import Callable, Dict, List, Optional


class Command:
    """Base class for all commands."""
    
    def __init__(self, text: str, args: List[str]):
        self.text = text
        self.args = args
        
    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.args})"


class PadCommand(Command):
    """Command to pad a value: pad VALUE [COLS] [FILL]."""
    
    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        
        # Default values, None means "use the session setting"
        self.value = None
        self.cols = None
        self.fill = None
        self.invalid_cols = None
        
        if len(args) >= 2:
            self.value = args[1]
            
        # Optional width
        if len(args) >= 3:
            try:
                self.cols = int(args[2])
            except ValueError:
                self.invalid_cols = args[2]
                
        # Optional fill, may be a quoted space
        if len(args) >= 4:
            self.fill = args[3]


class SetWidthCommand(Command):
    """Command to set the default target width."""
    
    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        
        self.cols = None
        
        if len(args) >= 2:
            try:
                self.cols = int(args[1])
            except ValueError:
                pass


class SetFillCommand(Command):
    """Command to set the default fill unit."""
    
    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        
        self.fill = None
        
        if len(args) >= 2:
            self.fill = args[1]


class SettingsCommand(Command):
    """Command to show the current session settings."""
    pass


class HelpCommand(Command):
    """Command to show help information."""
    pass


class ExitCommand(Command):
    """Command to exit the application."""
    pass


def split_arguments(text: str) -> List[str]:
    """Split a command line into arguments, honouring quotes.
    
    Falls back to whitespace splitting when the quotes are unbalanced.
    
    Args:
        text: Command line
        
    Returns:
        List of arguments, the command name first
    """
    try:
        return shlex.split(text)
    except ValueError:
        return text.split()


class CommandManager:
    """Handles command parsing and recognition."""
    
    def __init__(self):
        """Initialize the command manager."""
        # Command pattern mapping, matched against the lowercased input
        self.command_patterns: Dict[str, Callable[[str, List[str]], Command]] = {
            r'^(p|pad)(\s+.+)?$': PadCommand,
            r'^(w|width)(\s+\S+)?$': SetWidthCommand,
            r'^(f|fill)(\s+.+)?$': SetFillCommand,
            r'^(s|settings)$': SettingsCommand,
            r'^(h|help|\?)$': HelpCommand,
            r'^(exit|quit|q)$': ExitCommand,
        }
    
    def parse_input(self, text: str) -> Optional[Command]:
        """Parse input to determine if it's a command.
        
        Args:
            text: Input text
            
        Returns:
            Command object if input is a command, None otherwise
        """
        if not text or not text.strip():
            return None
            
        text_lower = text.lower().strip()
        
        for pattern, command_class in self.command_patterns.items():
            if re.match(pattern, text_lower):
                # Arguments keep their original case, only the name is normalized
                args = split_arguments(text.strip())
                if args:
                    args[0] = args[0].lower()
                return command_class(text, args)
                
        return None
