import pytest

from leftpad.config import DEFAULT_COLS, DEFAULT_FILL
from leftpad.core.exceptions import ConfigurationError, InvalidArgumentError
from leftpad.core.session import PadSession


def test_defaults(session):
    assert session.cols == DEFAULT_COLS
    assert session.fill == DEFAULT_FILL
    assert session.last_result is None


def test_pad_uses_session_defaults():
    session = PadSession(8, "0")
    assert session.pad("42") == "00000042"
    assert session.last_result == "00000042"


def test_pad_arguments_override_defaults():
    session = PadSession(8, "0")
    assert session.pad("42", 4, "*") == "**42"


def test_pad_propagates_invalid_arguments(session):
    with pytest.raises(InvalidArgumentError):
        session.pad(None)


@pytest.mark.parametrize("cols", [-1, "10", 2.5, True])
def test_invalid_width_is_rejected(cols):
    with pytest.raises(ConfigurationError) as exc_info:
        PadSession(cols=cols)
    assert exc_info.value.setting == "cols"


@pytest.mark.parametrize("fill", ["", None, []])
def test_invalid_fill_is_rejected(fill):
    with pytest.raises(ConfigurationError) as exc_info:
        PadSession(fill=fill)
    assert exc_info.value.setting == "fill"


def test_numeric_fill_is_converted():
    assert PadSession(fill=0).fill == "0"


def test_set_cols(session):
    result = session.set_cols(4)
    assert result['success'] is True
    assert result['previous_value'] == DEFAULT_COLS
    assert result['current_value'] == 4
    assert session.cols == 4


def test_set_cols_rejects_negative_width(session):
    result = session.set_cols(-2)
    assert result['success'] is False
    assert "negative" in result['error']
    assert session.cols == DEFAULT_COLS


def test_set_fill(session):
    result = session.set_fill("0")
    assert result['success'] is True
    assert result['previous_value'] == " "
    assert session.fill == "0"


def test_set_fill_rejects_empty_fill(session):
    result = session.set_fill("")
    assert result['success'] is False
    assert session.fill == DEFAULT_FILL


def test_get_settings(session):
    session.pad("a", 3)
    assert session.get_settings() == {'cols': DEFAULT_COLS, 'fill': " ", 'last_result': "  a"}
