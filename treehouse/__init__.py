"""Treehouse visitor desk: greet, refuse or admit visitors from the console."""

__version__ = "0.1.0"
