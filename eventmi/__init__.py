"""Eventmi - server-rendered event management."""
__version__ = "1.0.0"
