"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the data models used by the delete action:
- DeleteResult: Outcome of a delete queue attempt

All models are exported here for convenient importing.
"""

from .result import DeleteResult

__all__ = [
    "DeleteResult",
]
