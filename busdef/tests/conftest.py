"""Unit tests configuration file."""

import pytest

from busdef.defs import ArgDef, SignalDef


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def notify():
    """The Notify signal with one string argument, still in its build phase."""
    signal = SignalDef("Notify", "s", "com.example.Iface")
    signal.add_arg(ArgDef("message", "s"))
    return signal
