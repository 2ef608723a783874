"""
Interactive command line interface for leftpad.

Reads commands line by line through prompt_toolkit and dispatches them to
the registered command handlers.
"""
from typing import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import CompleteStyle

from leftpad.config import PROMPT_TEXT
from leftpad.core.commands import CommandManager, ExitCommand, HelpCommand
from leftpad.core.completer import CommandCompleter
from leftpad.core.session import PadSession
from leftpad.interfaces.command_handlers import CommandHandlerRegistry
from leftpad.ui.resources import (BANNER, HELP_TEXT, Emojis,
                                  format_error_message, format_info_message)
from leftpad.utils.logging_config import get_logger


class CliInterface:
    """Interactive padding session on the terminal."""
    
    def __init__(self, session: PadSession, command_manager: CommandManager,
                 show_fill: bool = False,
                 writer: Callable[[str], None] = print):
        """Initialize the CLI interface.
        
        Args:
            session: Session holding the default width and fill
            command_manager: Parser for command lines
            show_fill: Draw results in a box with the padding made visible
            writer: Function receiving every line of output
        """
        self.session = session
        self.command_manager = command_manager
        self.show_fill = show_fill
        self.write = writer
        
        self.logger = get_logger(__name__)
        self.command_registry = CommandHandlerRegistry()
    
    def handle_input(self, text: str) -> bool:
        """Handle one line of input.
        
        Args:
            text: The line entered by the user
            
        Returns:
            False when the session should end, True otherwise
        """
        if not text.strip():
            return True
        
        command = self.command_manager.parse_input(text)
        if command is None:
            self.logger.debug(f"Unknown command: {text.strip()!r}")
            self.write(format_error_message(f"Unknown command: '{text.strip()}'. Type 'help' for a list of commands."))
            return True
        
        if isinstance(command, ExitCommand):
            self.write(f"\n{Emojis.BYE} Goodbye!")
            return False
        
        if isinstance(command, HelpCommand):
            self.write(HELP_TEXT)
            return True
        
        result = self.command_registry.dispatch(command, self)
        if not result.success:
            self.logger.debug(f"Command {command} failed: {result.message}")
        return True
    
    def interactive_session(self):
        """Run the interactive session until the user exits."""
        self.write(BANNER)
        self.write(format_info_message("Type 'help' for a list of commands, 'exit' to quit."))
        self.logger.info("Interactive session started")
        
        prompt_session = PromptSession(
            history=InMemoryHistory(),
            completer=CommandCompleter(),
            complete_style=CompleteStyle.MULTI_COLUMN,
        )
        
        while True:
            try:
                text = prompt_session.prompt(PROMPT_TEXT)
            except (KeyboardInterrupt, EOFError):
                self.write(f"\n{Emojis.BYE} Goodbye!")
                break
            
            if not self.handle_input(text):
                break
        
        self.logger.info("Interactive session ended")
