"""
Copyright (c) 2025 Jakob Bolliger

This file is part of leftpad.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Text utilities for displaying padded results in the terminal.

Padding with spaces is invisible on a terminal, so these helpers can mark
the prepended part and draw the result in a box with a column ruler.
"""
from leftpad.config import RULER_TICK_INTERVAL, VISIBLE_FILL_MARKER
from leftpad.ui.resources import BOX_BORDER


def show_fill(padded: str, text: str, marker: str = VISIBLE_FILL_MARKER) -> str:
    """Replace spaces in the padding part of a result with a visible marker.

    Args:
        padded: The padded result
        text: The textual value the result ends with
        marker: Character drawn in place of padding spaces

    Returns:
        The result with its padding made visible
    """
    padding_length = len(padded) - len(text)
    if padding_length <= 0:
        return padded
    return padded[:padding_length].replace(' ', marker) + padded[padding_length:]


def get_ruler(width: int) -> str:
    """Build a column ruler like ``....|....|`` for the given width."""
    return "".join(
        "|" if position % RULER_TICK_INTERVAL == 0 else "."
        for position in range(1, width + 1)
    )


def get_result_in_box(padded: str, text: str, cols: int) -> str:
    """Draw a padded result in a box with a column ruler below it.
    
    The box is as wide as the result or the requested width, whichever is
    larger, so overshoot from multi-character fills stays visible.

    Args:
        padded: The padded result
        text: The textual value the result ends with
        cols: The requested width

    Returns:
        String with the formatted box
    """
    width = max(len(padded), cols, 1)
    horizontal = BOX_BORDER['horizontal'] * (width + 2)
    content = show_fill(padded, text).ljust(width)

    return "\n".join([
        f"{BOX_BORDER['top_left']}{horizontal}{BOX_BORDER['top_right']}",
        f"{BOX_BORDER['vertical']} {content} {BOX_BORDER['vertical']}",
        f"{BOX_BORDER['bottom_left']}{horizontal}{BOX_BORDER['bottom_right']}",
        f"  {get_ruler(width)}",
    ])
