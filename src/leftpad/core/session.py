"""
Session state for interactive padding.

`leftpad` itself is stateless. The session only remembers the default
width and fill unit used when a command leaves them out.
"""
from typing import Any, Dict

from leftpad.config import DEFAULT_COLS, DEFAULT_FILL
from leftpad.core.exceptions import ConfigurationError, InvalidArgumentError
from leftpad.core.padder import leftpad, to_text
from leftpad.utils.logging_config import get_logger


class PadSession:
    """Default padding settings shared by the commands of one session."""
    
    def __init__(self, cols: int = DEFAULT_COLS, fill: str = DEFAULT_FILL):
        """Initialize the session.
        
        Args:
            cols: Default target width
            fill: Default fill unit
            
        Raises:
            ConfigurationError: If cols is negative or fill is empty
        """
        self.logger = get_logger(__name__)
        self.cols = self._validate_cols(cols)
        self.fill = self._validate_fill(fill)
        self.last_result = None
        self.logger.info(f"Session started with width {self.cols} and fill {self.fill!r}")
    
    @staticmethod
    def _validate_cols(cols) -> int:
        if isinstance(cols, bool) or not isinstance(cols, int):
            raise ConfigurationError(f"Width must be an integer, got {cols!r}", "cols")
        if cols < 0:
            raise ConfigurationError(f"Width must not be negative, got {cols}", "cols")
        return cols
    
    @staticmethod
    def _validate_fill(fill) -> str:
        try:
            fill_text = to_text(fill, "fill")
        except InvalidArgumentError as e:
            raise ConfigurationError(str(e), "fill") from e
        if not fill_text:
            raise ConfigurationError("Fill must not be empty", "fill")
        return fill_text
    
    def pad(self, value, cols: int = None, fill=None) -> str:
        """Pad a value, using the session defaults for omitted arguments.
        
        Raises:
            InvalidArgumentError: If the arguments cannot be used for padding
        """
        cols = self.cols if cols is None else cols
        fill = self.fill if fill is None else fill
        
        result = leftpad(value, cols, fill)
        self.last_result = result
        self.logger.debug(f"Padded {value!r} to width {cols} with {fill!r}: {result!r}")
        return result
    
    def set_cols(self, cols: int) -> Dict[str, Any]:
        """Set the default target width.
        
        Args:
            cols: New default width
            
        Returns:
            Dictionary with operation results
        """
        previous_value = self.cols
        try:
            self.cols = self._validate_cols(cols)
        except ConfigurationError as e:
            self.logger.warning(f"Rejected width {cols!r}: {e}")
            return {
                'success': False,
                'error': str(e),
                'previous_value': previous_value,
                'current_value': self.cols
            }
        
        return {
            'success': True,
            'previous_value': previous_value,
            'current_value': self.cols,
            'message': f"Default width set to {self.cols}"
        }
    
    def set_fill(self, fill) -> Dict[str, Any]:
        """Set the default fill unit.
        
        Args:
            fill: New default fill unit
            
        Returns:
            Dictionary with operation results
        """
        previous_value = self.fill
        try:
            self.fill = self._validate_fill(fill)
        except ConfigurationError as e:
            self.logger.warning(f"Rejected fill {fill!r}: {e}")
            return {
                'success': False,
                'error': str(e),
                'previous_value': previous_value,
                'current_value': self.fill
            }
        
        return {
            'success': True,
            'previous_value': previous_value,
            'current_value': self.fill,
            'message': f"Default fill set to {self.fill!r}"
        }
    
    def get_settings(self) -> Dict[str, Any]:
        """Return the current session settings."""
        return {
            'cols': self.cols,
            'fill': self.fill,
            'last_result': self.last_result
        }
