"""
Configuration command handlers for the session width and fill settings.
"""

from typing import Optional

from leftpad.core.commands import (Command, SetFillCommand, SetWidthCommand,
                                   SettingsCommand)
from leftpad.interfaces.command_handlers import CommandHandler, CommandResult
from leftpad.ui.resources import Emojis, format_error_message


class ConfigurationHandler(CommandHandler):
    """Handles configuration commands (width, fill and settings)."""
    
    command_types = (SetWidthCommand, SetFillCommand, SettingsCommand)

    def validate(self, command: Command) -> Optional[str]:
        if isinstance(command, SetWidthCommand) and command.cols is None:
            return "Please specify the width as a number: width N"
        if isinstance(command, SetFillCommand) and command.fill is None:
            return "Please specify the fill unit: fill C"
        return None
    
    def _execute(self, command: Command, cli_interface) -> CommandResult:
        """Execute configuration command."""
        if isinstance(command, SetWidthCommand):
            return self._handle_set_width(command, cli_interface)
        elif isinstance(command, SetFillCommand):
            return self._handle_set_fill(command, cli_interface)
        return self._handle_settings(command, cli_interface)
    
    def _handle_set_width(self, command: SetWidthCommand, cli_interface) -> CommandResult:
        """Handle setting the default width."""
        result = cli_interface.session.set_cols(command.cols)
        return self._report_change(result, "Default width", cli_interface)
    
    def _handle_set_fill(self, command: SetFillCommand, cli_interface) -> CommandResult:
        """Handle setting the default fill unit."""
        result = cli_interface.session.set_fill(command.fill)
        return self._report_change(result, "Default fill", cli_interface)
    
    def _report_change(self, result, label: str, cli_interface) -> CommandResult:
        if result['success']:
            previous = result['previous_value']
            current = result['current_value']
            cli_interface.write(f"\n{Emojis.CHECK} {label} changed from {previous!r} to {current!r}.")
            return CommandResult(True, result['message'], result)
        
        error_msg = result.get('error', 'Unknown error')
        cli_interface.write(format_error_message(f"Error: {error_msg}"))
        return CommandResult(False, error_msg, result)
    
    def _handle_settings(self, command: SettingsCommand, cli_interface) -> CommandResult:
        """Handle displaying the current settings."""
        settings = cli_interface.session.get_settings()
        cli_interface.write(f"\n{Emojis.SETTINGS} Current settings:")
        cli_interface.write(f"  {Emojis.BULLET} width: {settings['cols']}")
        cli_interface.write(f"  {Emojis.BULLET} fill: {settings['fill']!r}")
        if settings['last_result'] is not None:
            cli_interface.write(f"  {Emojis.BULLET} last result: {settings['last_result']!r}")
        return CommandResult(True, "Settings displayed", settings)
