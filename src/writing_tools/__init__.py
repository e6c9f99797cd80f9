"""Writing Tools - character counts and dialogue analysis for manuscripts."""

__version__ = "1.0.0"
