"""
Configuration settings for the leftpad application.
All constants and configuration variables are defined here.
"""
import os
from pathlib import Path

# Padding defaults
DEFAULT_FILL = " "
DEFAULT_COLS = 10

# Display Settings
VISIBLE_FILL_MARKER = "·"
RULER_TICK_INTERVAL = 5
PROMPT_TEXT = "leftpad> "

# Logging Settings
LEFTPAD_HOME_ENV = "LEFTPAD_HOME"
LOG_FILE_NAME = "leftpad.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_leftpad_home() -> Path:
    """Return the leftpad home directory (``$LEFTPAD_HOME`` or ``~/.leftpad``)."""
    home = os.environ.get(LEFTPAD_HOME_ENV)
    if home:
        return Path(home)
    return Path.home() / ".leftpad"


def get_logs_dir() -> Path:
    """Return the directory application logs are written to."""
    return get_leftpad_home() / "logs"
