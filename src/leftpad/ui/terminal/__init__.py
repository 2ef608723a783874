"""
Terminal display helpers for the leftpad application.
"""
from leftpad.ui.terminal.text_utils import get_result_in_box, get_ruler, show_fill

__all__ = ['get_result_in_box', 'get_ruler', 'show_fill']
