"""
Command completion functionality for the leftpad interactive session.
"""
from prompt_toolkit.completion import Completer, Completion


class CommandCompleter(Completer):
    """Completer for leftpad commands with descriptions."""
    
    def __init__(self):
        """Initialize the command completer with available commands."""
        self.command_list = [
            # Padding
            ("pad", "Pad a value: pad VALUE [WIDTH] [FILL]"),
            ("p", "Pad a value (shortcut)"),
            
            # Settings
            ("width", "Set the default width"),
            ("w", "Set the default width (shortcut)"),
            ("fill", "Set the default fill unit"),
            ("f", "Set the default fill unit (shortcut)"),
            ("settings", "Show the current settings"),
            ("s", "Show the current settings (shortcut)"),
            
            # Essential commands
            ("help", "Show help information"),
            ("h", "Show help information"),
            ("exit", "Exit the application"),
            ("quit", "Exit the application"),
            ("q", "Exit the application"),
        ]
        
        self.commands = [cmd for cmd, _ in self.command_list]
    
    def get_completions(self, document, complete_event):
        """Get command completions based on the user's input.
        
        Args:
            document: The Document instance for the current input
            complete_event: The CompleteEvent that triggered this completion
            
        Yields:
            Completion instances for matching commands with descriptions
        """
        text = document.text_before_cursor.lstrip()
        
        # Only the command name is completed, never its arguments
        if ' ' in text:
            return
            
        text_lower = text.lower()
        for command, description in self.command_list:
            if command.startswith(text_lower):
                yield Completion(
                    command,
                    start_position=-len(text),
                    display_meta=description
                )
