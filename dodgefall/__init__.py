"""Dodgefall - a falling-obstacle dodge game for pygame."""

__version__ = "1.0.0"
