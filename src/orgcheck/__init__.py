"""Organization hierarchy checks: long reporting lines and manager pay."""

__version__ = "0.1.0"
