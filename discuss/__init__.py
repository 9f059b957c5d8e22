"""discuss - mutation backend for a community discussion platform."""

__version__ = "0.1.0"
