"""Command-line interface for the May I evaluator."""

from .main import app, main

__all__ = ["app", "main"]
