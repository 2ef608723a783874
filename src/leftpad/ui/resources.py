"""
Copyright (c) 2025 Jakob Bolliger

This file is part of leftpad.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

UI resources for the leftpad application.

This module contains centralized UI elements like banners, help text and
message formatting used across the command line and the interactive session.
"""

# Emoji constants
class Emojis:
    """Class containing emoji constants to ensure consistent usage throughout the code."""
    CHECK = "✓"
    ERROR = "❌"
    BYE = "👋"
    INFO = "ℹ️"
    SETTINGS = "🔧"
    RESULT = "➜"
    BULLET = "•"

# Border characters for box drawing
BOX_BORDER = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│"
}

BANNER = r"""
  _        __ _                  _
 | |  ___ / _| |_ _ __  __ _  __| |
 | | / -_)  _|  _| '_ \/ _` |/ _` |
 |_| \___|_|  \__| .__/\__,_|\__,_|
                 |_|
"""

HELP_TEXT = """
COMMANDS:
    pad VALUE [WIDTH] [FILL]  (p)   Pad VALUE on the left to WIDTH characters
                                    Quote values containing spaces: pad "a b" 8
    width N                   (w)   Set the default width
    fill C                    (f)   Set the default fill unit, e.g. fill 0 or fill " "
    settings                  (s)   Show the current width and fill
    help                      (h)   Show this help message
    exit                      (q)   Exit the application

NOTES:
    A value that is already WIDTH characters or longer is returned unchanged.
    A fill of several characters is prepended as a whole and may overshoot WIDTH.

KEYBINDINGS:
    Tab: Complete command names
    Up/Down: Navigate through input history
    Ctrl+C / Ctrl+D: Exit the application
"""


def format_error_message(message: str) -> str:
    """Format an error message with consistent emoji and structure.
    
    Args:
        message: The error message content
        
    Returns:
        Formatted error message string
    """
    return f"\n{Emojis.ERROR} {message}"


def format_info_message(message: str) -> str:
    """Format an info message with consistent emoji and structure."""
    return f"\n{Emojis.INFO} {message}"
