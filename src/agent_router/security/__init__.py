"""
Security helpers for prompt construction.
"""

from .input_validator import InputValidator

__all__ = ["InputValidator"]
