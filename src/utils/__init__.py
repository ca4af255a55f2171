"""
Module: utils
Description: Package initialization for utility functions.

This package contains shared helpers used throughout the action:
- logger: Structured logging configuration and helpers
- actions: GitHub Actions workflow commands and step outputs
"""

__all__ = []
