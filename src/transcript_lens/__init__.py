"""Transcript Lens: typed view models for coding-assistant CLI output."""

__version__ = "0.1.0"
