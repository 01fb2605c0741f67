"""Command line interface for Camel Cards."""

from .main import app, main

__all__ = ["app", "main"]
