"""
Copyright (c) 2025 Jakob Bolliger

This file is part of leftpad.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the LICENSE file in the
root directory of this source tree.

Left-padding of scalar values.

The padding itself only ever works on text: values are turned into their
textual representation by `to_text` first, so the padding loop does not
care whether it was given a string or a number.
"""
import math
import numbers
import operator

from leftpad.config import DEFAULT_FILL
from leftpad.core.exceptions import InvalidArgumentError


def to_text(value, argument: str = "value") -> str:
    """Convert a scalar value to its textual representation.

    Args:
        value: A string or a number
        argument: Name of the parameter being converted, used in errors

    Returns:
        The textual representation of the value

    Raises:
        InvalidArgumentError: If the value is not a string or a number, or
            its conversion fails
    """
    if isinstance(value, str):
        return value
    if not isinstance(value, numbers.Number):
        raise InvalidArgumentError(
            f"Cannot pad a value of type {type(value).__name__}", argument, value
        )
    try:
        return str(value)
    except Exception as e:
        raise InvalidArgumentError(f"Could not convert {argument} to text: {e}", argument) from e


def leftpad(value, cols: int, fill=DEFAULT_FILL) -> str:
    """Pad a value on the left until it is at least `cols` characters long.

    The whole fill string is prepended on every iteration, so a fill of more
    than one character can overshoot `cols`: ``leftpad("a", 4, "xy")`` gives
    ``"xyxya"`` (5 characters). The result always ends with the value's text
    and is never truncated.

    Examples:
        >>> leftpad("test", 10)
        '      test'
        >>> leftpad(3, 10, "0")
        '0000000003'
        >>> leftpad("test", 2)
        'test'

    Args:
        value: String or number to pad
        cols: Minimum width of the result; zero or negative means no padding
        fill: Padding unit, a space by default

    Returns:
        The padded string

    Raises:
        InvalidArgumentError: If value or fill cannot be converted to text,
            cols is not an integer, or fill is empty while padding is needed
    """
    text = to_text(value)
    fill_text = to_text(fill, "fill")
    try:
        cols = operator.index(cols)
    except TypeError as e:
        raise InvalidArgumentError("Width must be an integer", "cols", cols) from e

    missing = cols - len(text)
    if missing <= 0:
        return text
    if not fill_text:
        raise InvalidArgumentError("Fill must not be empty", "fill", fill)

    return fill_text * math.ceil(missing / len(fill_text)) + text
