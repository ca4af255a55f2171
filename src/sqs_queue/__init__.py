"""
Package: sqs_queue
Description: SQS queue operations for the delete action.

Validates queue URLs and deletes a queue through an async aioboto3
client, reporting the outcome as a DeleteResult.
"""

from .sqs import InvalidInputError, create_sqs_client, delete_queue, validate_queue_url

__all__ = [
    "InvalidInputError",
    "create_sqs_client",
    "delete_queue",
    "validate_queue_url",
]
