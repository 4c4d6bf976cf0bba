"""ytflow - Phase classification and progress scoring for video production."""

__version__ = "0.1.0"
