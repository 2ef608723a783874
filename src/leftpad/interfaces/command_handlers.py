"""
Command handlers for the leftpad CLI interface.

Each handler declares the command classes it accepts. The registry maps a
parsed command to its handler, and the handler checks the command's
arguments before running it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Type

from leftpad.core.commands import Command
from leftpad.ui.resources import format_error_message
from leftpad.utils.logging_config import get_logger


class CommandResult:
    """Result of command execution with success status and optional data."""

    def __init__(self, success: bool = True, message: str = "", data: Dict[str, Any] = None):
        self.success = success
        self.message = message
        self.data = data or {}

    def __str__(self):
        status = "SUCCESS" if self.success else "FAILURE"
        return f"CommandResult({status}: {self.message})"


class CommandHandler(ABC):
    """Base class for handlers of one or more command classes."""

    command_types: Tuple[Type[Command], ...] = ()

    def __init__(self):
        self.logger = get_logger(f"leftpad.handlers.{self.__class__.__name__}")

    def validate(self, command: Command) -> Optional[str]:
        """Check the command's arguments.

        Returns:
            A message describing the problem, or None if the command can run
        """
        return None

    def handle(self, command: Command, cli_interface) -> CommandResult:
        """Validate and run a command, reporting problems on the interface."""
        command_name = command.__class__.__name__
        try:
            problem = self.validate(command)
            if problem:
                self.logger.debug(f"Rejected {command_name}: {problem}")
                cli_interface.write(format_error_message(problem))
                return CommandResult(False, problem)

            result = self._execute(command, cli_interface)
        except Exception as e:
            error_msg = f"Handler {self.__class__.__name__} failed: {str(e)}"
            self.logger.error(error_msg, exc_info=True)
            return CommandResult(False, error_msg)

        if not result.success:
            self.logger.warning(f"{command_name} failed: {result.message}")
        return result

    @abstractmethod
    def _execute(self, command: Command, cli_interface) -> CommandResult:
        """Run a command that passed validation."""
        pass


class CommandHandlerRegistry:
    """Registry dispatching parsed commands to their handlers."""

    def __init__(self):
        self._handlers: Dict[Type[Command], CommandHandler] = {}
        self.logger = get_logger(__name__)
        self._register_default_handlers()

    def register(self, handler: CommandHandler):
        """Register a handler for every command class it declares."""
        for command_type in handler.command_types:
            self._handlers[command_type] = handler

    def get_handler(self, command: Command) -> Optional[CommandHandler]:
        """Get the handler for a parsed command, None if nothing handles it."""
        return self._handlers.get(type(command))

    def dispatch(self, command: Command, cli_interface) -> CommandResult:
        """Run a command through its handler."""
        handler = self.get_handler(command)
        if handler is None:
            self.logger.warning(f"No handler found for {command.__class__.__name__}")
            cli_interface.write(format_error_message(f"Command not supported: {command.text.strip()}"))
            return CommandResult(False, f"No handler for {command.__class__.__name__}")
        return handler.handle(command, cli_interface)

    @property
    def command_types(self):
        return set(self._handlers)

    def _register_default_handlers(self):
        # Import handlers here to avoid circular imports
        from leftpad.interfaces.handlers.configuration import \
            ConfigurationHandler
        from leftpad.interfaces.handlers.padding import PaddingHandler

        self.register(PaddingHandler())
        self.register(ConfigurationHandler())
