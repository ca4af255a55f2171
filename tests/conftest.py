"""
Module: conftest.py
Description: Shared pytest fixtures for SQS delete action tests.

Provides stub SQS clients, sample queue URLs and an isolated
environment so tests never depend on real AWS credentials or on the
variables set by a CI runner.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from botocore.exceptions import ClientError


ACTION_ENV_VARS = (
    "INPUT_QUEUE-URL",
    "QUEUE_URL",
    "INPUT_ENDPOINT-URL",
    "AWS_ENDPOINT_URL",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "GITHUB_OUTPUT",
    "GITHUB_ACTIONS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove action inputs and runner variables from the environment.

    Keeps tests predictable when the suite itself runs on GitHub Actions.
    """
    for name in ACTION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("LOG_FORMAT", "json")


@pytest.fixture
def queue_url():
    """Provide a well-formed SQS queue URL."""
    return "https://sqs.us-east-1.amazonaws.com/123456789012/my-queue"


@pytest.fixture
def localstack_queue_url():
    """Provide a localstack queue URL."""
    return "http://localhost:4566/000000000000/my-queue"


@pytest.fixture
def sqs_stub():
    """
    Provide an SQS client stub whose delete_queue always succeeds.

    Mirrors the aioboto3 client surface used by delete_queue().
    """
    client = MagicMock()
    client.delete_queue = AsyncMock(return_value={})
    return client


@pytest.fixture
def client_error():
    """Build botocore ClientError instances for DeleteQueue."""
    def _build(code: str, message: str = "") -> ClientError:
        error = {'Code': code}
        if message:
            error['Message'] = message
        return ClientError(
            error_response={'Error': error},
            operation_name='DeleteQueue'
        )
    return _build


@pytest.fixture
def client_context(sqs_stub):
    """
    Provide an async context manager yielding the SQS stub.

    Stands in for create_sqs_client() so the entry point can run
    without AWS.
    """
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=sqs_stub)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def github_output(tmp_path, monkeypatch):
    """Point GITHUB_OUTPUT at a temporary file and return its path."""
    path = tmp_path / "github_output"
    path.write_text("")
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return path

