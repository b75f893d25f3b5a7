"""Offer letter generator: compensation breakdown service."""

__version__ = "0.1.0"
