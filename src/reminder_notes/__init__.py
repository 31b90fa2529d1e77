"""Structured notes for reminders, packed into a single text field."""

__version__ = "0.1.0"
