"""
Module: main.py
Description: Entry point for the SQS delete queue action.

Reads the queue-url input, creates an SQS client from the ambient AWS
environment, deletes the queue and reports the outcome to the GitHub
Actions runner through the deleted output and the process exit code.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from config.settings import Settings, get_settings
from sqs_queue.sqs import create_sqs_client, delete_queue
from utils import actions
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

QUEUE_URL_INPUT = 'queue-url'


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Delete an AWS SQS queue by URL"
    )
    parser.add_argument(
        "--queue-url",
        help="URL of the queue to delete (default: INPUT_QUEUE-URL or QUEUE_URL)"
    )
    parser.add_argument(
        "--endpoint-url",
        help="Custom SQS endpoint, e.g. http://localhost:4566"
    )
    parser.add_argument(
        "--region",
        help="AWS region (default: AWS_REGION / AWS_DEFAULT_REGION)"
    )
    return parser.parse_args(argv)


async def run(settings: Settings) -> int:
    """
    Delete the configured queue and report the outcome.

    Args:
        settings: Validated action settings

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    queue_url = settings.queue_url
    if not queue_url:
        return actions.set_failed(f"Input required and not supplied: {QUEUE_URL_INPUT}")

    logger.info("AWS SQS Delete Queue")
    logger.info(f"Queue URL: {queue_url}")

    async with create_sqs_client(settings.aws_region, settings.endpoint_url) as client:
        result = await delete_queue(client, queue_url)

    if not result.success:
        return actions.set_failed(result.error or "Failed to delete queue")

    actions.set_output('deleted', 'true')

    logger.info("")
    logger.info("=" * 50)
    logger.info("Queue deleted successfully")
    logger.info(f"Queue URL: {queue_url}")
    logger.info("=" * 50)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the action.

    Every failure, including settings and client construction errors,
    ends up as a single set_failed() message.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Process exit code
    """
    args = parse_arguments(argv)

    try:
        settings = get_settings(
            queue_url=args.queue_url,
            endpoint_url=args.endpoint_url,
            aws_region=args.region
        )
        configure_logging(settings.log_level, settings.log_format)

        return asyncio.run(run(settings))

    except Exception as e:
        logger.debug(
            "Unhandled exception occurred",
            error=str(e),
            error_type=type(e).__name__
        )
        return actions.set_failed(str(e) or type(e).__name__)


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
