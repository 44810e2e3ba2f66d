import pytest

from halfblock.terminal import TerminalSize


@pytest.fixture
def terminal():
    """A fixed 80x26 terminal, leaving 24 text rows for frames."""
    return lambda: TerminalSize(80, 26)
