"""Binary reflected Gray code visualizer."""

__version__ = "0.1.0"
