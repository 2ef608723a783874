"""
Padding command handler.
"""

from typing import Optional

from leftpad.core.commands import PadCommand
from leftpad.core.exceptions import InvalidArgumentError
from leftpad.interfaces.command_handlers import CommandHandler, CommandResult
from leftpad.ui.resources import Emojis, format_error_message
from leftpad.ui.terminal.text_utils import get_result_in_box


class PaddingHandler(CommandHandler):
    """Handles the pad command."""

    command_types = (PadCommand,)

    def validate(self, command: PadCommand) -> Optional[str]:
        if command.value is None:
            return "Please specify a value to pad: pad VALUE [WIDTH] [FILL]"
        if command.invalid_cols is not None:
            return f"Width must be an integer, got '{command.invalid_cols}'"
        return None

    def _execute(self, command: PadCommand, cli_interface) -> CommandResult:
        session = cli_interface.session
        try:
            result = session.pad(command.value, command.cols, command.fill)
        except InvalidArgumentError as e:
            cli_interface.write(format_error_message(str(e)))
            return CommandResult(False, str(e))

        cols = session.cols if command.cols is None else command.cols
        if cli_interface.show_fill:
            cli_interface.write(get_result_in_box(result, command.value, cols))
        else:
            cli_interface.write(f"{Emojis.RESULT} '{result}'")

        return CommandResult(True, f"Padded to {len(result)} characters", {'result': result})
