"""
Module: actions.py
Description: GitHub Actions workflow command helpers.

Writes the commands the Actions runner understands on stdout and the
step output file, so the delete action can report warnings, errors,
outputs and its final pass/fail state to the CI host.

Key Components:
- escape_data() / escape_property(): Workflow command escaping
- format_command(): Build a ::command prop=value::message line
- set_output(): Publish a step output via GITHUB_OUTPUT
- set_failed(): Report the failure message for the step

Dependencies: os, sys, uuid
Author: SQS Delete Queue Action Team
"""

import os
import sys
import uuid
from typing import Dict, Optional, TextIO


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return (
        str(value)
        .replace('%', '%25')
        .replace('\r', '%0D')
        .replace('\n', '%0A')
    )


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return (
        escape_data(value)
        .replace(':', '%3A')
        .replace(',', '%2C')
    )


def format_command(
    command: str,
    message: str = '',
    properties: Optional[Dict[str, str]] = None
) -> str:
    """
    Build a single workflow command line.

    Args:
        command: Command name (warning, error, set-output, ...)
        message: Command message, escaped before rendering
        properties: Optional command properties (e.g. name=deleted)

    Returns:
        Command string without trailing newline

    Example:
        >>> format_command('warning', 'Queue URL looks odd')
        '::warning::Queue URL looks odd'
    """
    line = f"::{command}"

    if properties:
        rendered = ','.join(
            f"{key}={escape_property(value)}"
            for key, value in properties.items()
            if value is not None
        )
        if rendered:
            line += f" {rendered}"

    return f"{line}::{escape_data(message)}"


def issue_command(
    command: str,
    message: str = '',
    properties: Optional[Dict[str, str]] = None,
    stream: Optional[TextIO] = None
) -> None:
    """Write a workflow command to stdout."""
    out = stream or sys.stdout
    out.write(format_command(command, message, properties) + os.linesep)
    out.flush()


def warning(message: str) -> None:
    """Emit a warning annotation."""
    issue_command('warning', message)


def error(message: str) -> None:
    """Emit an error annotation."""
    issue_command('error', message)


def set_output(name: str, value: str) -> None:
    """
    Publish a step output.

    Appends a delimited key/value entry to the file named by
    GITHUB_OUTPUT. When the runner does not provide that file the
    legacy set-output command is printed instead.

    Args:
        name: Output name as declared in action.yml
        value: Output value

    Raises:
        ValueError: If name or value contains the generated delimiter
    """
    output_path = os.environ.get('GITHUB_OUTPUT')

    if not output_path:
        sys.stdout.write(os.linesep)
        issue_command('set-output', value, {'name': name})
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name:
        raise ValueError(f"Unexpected input: name should not contain the delimiter \"{delimiter}\"")
    if delimiter in value:
        raise ValueError(f"Unexpected input: value should not contain the delimiter \"{delimiter}\"")

    with open(output_path, 'a', encoding='utf-8') as output_file:
        output_file.write(
            f"{name}<<{delimiter}{os.linesep}{value}{os.linesep}{delimiter}{os.linesep}"
        )


def set_failed(message: str) -> int:
    """
    Report the step as failed.

    Emits the message as an error annotation and returns the exit
    code the process should terminate with.

    Args:
        message: Human-readable failure description

    Returns:
        Process exit code (always 1)
    """
    error(message)
    return 1
