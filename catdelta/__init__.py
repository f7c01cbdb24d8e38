"""catdelta -- semantic delta between a baseline and a preview catalog."""

__version__ = "0.3.0"
