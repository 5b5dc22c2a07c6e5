"""Planet Rush: real-time planetary conquest simulation engine."""

__version__ = "0.1.0"
