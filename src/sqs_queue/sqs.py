"""
Module: sqs.py
Description: SQS queue deletion.

Validates queue URLs and deletes a queue through an async SQS client.
Any failure is reported as a DeleteResult instead of an exception so
the caller only has to inspect a single value.
"""

import re
from typing import Any, Optional
from urllib.parse import urlsplit

from aioboto3 import Session
from botocore.exceptions import ClientError

from models.result import DeleteResult
from utils.logger import get_logger

logger = get_logger(__name__)

SQS_DOMAIN_SUFFIX = '.amazonaws.com'
LOCAL_HOST = 'localhost'
EXPECTED_URL_FORMAT = 'https://sqs.<region>.amazonaws.com/<account-id>/<queue-name>'

# DNS names, IPv4 and (unbracketed) IPv6 literals
_HOST_PATTERN = re.compile(r'^(?:[A-Za-z0-9_~-]+(?:\.[A-Za-z0-9_~-]+)*\.?|[0-9A-Fa-f:.]+)$')


class InvalidInputError(ValueError):
    """Raised when a queue URL is empty or cannot be parsed."""


def validate_queue_url(queue_url: str) -> None:
    """
    Validate a queue URL before deletion.

    Hosts outside the SQS domain only produce a warning so that
    localstack and other test endpoints keep working.

    Args:
        queue_url: Candidate queue URL

    Raises:
        InvalidInputError: If the URL is empty or malformed
    """
    if queue_url is None or (isinstance(queue_url, str) and not queue_url.strip()):
        raise InvalidInputError("Queue URL cannot be empty")
    if not isinstance(queue_url, str):
        raise InvalidInputError(f"Queue URL must be a string, got {type(queue_url).__name__}")

    try:
        parts = urlsplit(queue_url)
        host = parts.hostname
        # Raises ValueError for ports outside 0-65535
        parts.port
    except ValueError:
        raise InvalidInputError(f'Invalid queue URL format: "{queue_url}"') from None

    if not parts.scheme or not parts.netloc or not host or not _HOST_PATTERN.match(host):
        raise InvalidInputError(f'Invalid queue URL format: "{queue_url}"')

    if SQS_DOMAIN_SUFFIX not in host and host != LOCAL_HOST:
        logger.warning(
            f'Queue URL "{queue_url}" does not appear to be a valid AWS SQS queue URL. '
            f'Expected format: {EXPECTED_URL_FORMAT}'
        )


def _error_message(exc: Exception) -> str:
    """Human-readable message for a failed delete."""
    if isinstance(exc, ClientError):
        error = exc.response.get('Error', {})
        return error.get('Message') or error.get('Code') or str(exc)
    return str(exc) or type(exc).__name__


async def delete_queue(client: Any, queue_url: str) -> DeleteResult:
    """
    Delete an SQS queue.

    Makes exactly one DeleteQueue call. Nothing is retried and no
    exception escapes: validation errors, service errors and network
    failures all come back as a failed result.

    Args:
        client: Async SQS client (e.g. from aioboto3) exposing delete_queue()
        queue_url: URL of the queue to delete

    Returns:
        DeleteResult with success=True, or success=False and an error message

    Example:
        >>> async with Session().client('sqs') as sqs:
        ...     result = await delete_queue(sqs, queue_url)
        >>> result.success
        True
    """
    try:
        validate_queue_url(queue_url)

        logger.info(f"Deleting queue: {queue_url}")

        await client.delete_queue(QueueUrl=queue_url)

        logger.info("Queue deleted successfully", queue_url=queue_url)

        return DeleteResult.ok()

    except ClientError as e:
        message = _error_message(e)
        logger.error(
            f"Failed to delete queue: {message}",
            queue_url=queue_url,
            error_code=e.response.get('Error', {}).get('Code')
        )
        return DeleteResult.failed(message)

    except Exception as e:
        message = _error_message(e)
        logger.error(
            f"Failed to delete queue: {message}",
            queue_url=queue_url,
            error_type=type(e).__name__
        )
        return DeleteResult.failed(message)


def create_sqs_client(region: Optional[str] = None, endpoint_url: Optional[str] = None):
    """
    Create an async SQS client context manager.

    Credentials come from the ambient AWS environment.

    Args:
        region: AWS region, or None for botocore's default resolution
        endpoint_url: Optional custom endpoint (e.g. localstack)

    Returns:
        Async context manager yielding an aioboto3 SQS client
    """
    session = Session()
    return session.client('sqs', region_name=region, endpoint_url=endpoint_url)
