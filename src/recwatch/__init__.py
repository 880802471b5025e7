"""recwatch - Watch a TV guide and nag about unrecorded episodes."""

__version__ = "0.1.0"
