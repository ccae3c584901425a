"""Version information for neo-batch."""

__version__ = "0.1.0"
