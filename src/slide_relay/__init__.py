"""Real-time presentation state relay."""

__version__ = "0.1.0"
