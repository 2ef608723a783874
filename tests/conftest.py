import pytest

from leftpad.core.commands import CommandManager
from leftpad.core.session import PadSession
from leftpad.interfaces.cli import CliInterface


@pytest.fixture(autouse=True)
def leftpad_home(tmp_path, monkeypatch):
    """Keep log files out of the real home directory."""
    monkeypatch.setenv("LEFTPAD_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def session():
    return PadSession()


@pytest.fixture
def output():
    return []


@pytest.fixture
def cli(session, output):
    return CliInterface(session, CommandManager(), writer=output.append)
