"""Terminal to-do list built from a weekly template and today's saved progress."""

__version__ = "0.1.0"
