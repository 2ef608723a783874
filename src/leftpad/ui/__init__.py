"""
UI package for the leftpad application.

This package contains formatting utilities and resources used by the
command line and the interactive session.
"""
from leftpad.ui.resources import (BOX_BORDER, HELP_TEXT, Emojis,
                                  format_error_message, format_info_message)

__all__ = [
    'Emojis',
    'BOX_BORDER',
    'HELP_TEXT',
    'format_error_message',
    'format_info_message',
]
