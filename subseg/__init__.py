"""Caption segmentation for transcribed speech."""

__version__ = "1.0.0"
