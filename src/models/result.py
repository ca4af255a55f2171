"""
Module: result.py
Description: Result model for the delete queue operation.

Defines the value returned by delete_queue(). A result is produced
once per invocation, consumed immediately by the entry point and
never persisted.

Key Components:
- DeleteResult: success flag plus error message on failure
- Invariant: error is present if and only if success is False

Dependencies: pydantic, typing
Author: SQS Delete Queue Action Team
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class DeleteResult(BaseModel):
    """
    Outcome of a single delete queue attempt.

    Attributes:
        success: Whether the queue was deleted
        error: Human-readable failure description (only present if success=False)
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(
        ...,
        description="Whether the queue was deleted"
    )
    error: Optional[str] = Field(
        default=None,
        description="Failure description (only present if success=False)"
    )

    @model_validator(mode='after')
    def check_error_matches_success(self) -> 'DeleteResult':
        """Ensure error is set exactly when the operation failed."""
        if self.success and self.error is not None:
            raise ValueError("error must not be set on a successful result")
        if not self.success and not self.error:
            raise ValueError("error is required on a failed result")
        return self

    @classmethod
    def ok(cls) -> 'DeleteResult':
        """Build a successful result."""
        return cls(success=True)

    @classmethod
    def failed(cls, message: str) -> 'DeleteResult':
        """Build a failed result carrying the given message."""
        return cls(success=False, error=message)

    @property
    def status(self) -> str:
        """Terminal state of the operation: 'succeeded' or 'failed'."""
        return "succeeded" if self.success else "failed"
