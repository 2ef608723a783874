from leftpad.core.exceptions import (ConfigurationError, InvalidArgumentError,
                                     LeftpadError)


def test_invalid_argument_message_includes_details():
    error = InvalidArgumentError("Width must be an integer", "cols", "10")
    assert str(error) == "Width must be an integer (Argument: cols) (Value: '10')"
    assert error.argument == "cols"
    assert error.value == "10"


def test_invalid_argument_message_without_details():
    assert str(InvalidArgumentError("Bad value")) == "Bad value"


def test_configuration_error_message_includes_setting():
    error = ConfigurationError("Fill must not be empty", "fill")
    assert str(error) == "Fill must not be empty (Setting: fill)"


def test_hierarchy():
    assert issubclass(InvalidArgumentError, LeftpadError)
    assert issubclass(ConfigurationError, LeftpadError)
