"""
Module: test_action_metadata.py
Description: Checks on the composite action definition.

The action installs its top-level packages (config, models, utils,
...) into a dedicated virtual environment so they cannot clash with
packages in the caller's Python.
"""

from pathlib import Path

ACTION_FILE = Path(__file__).resolve().parents[2] / "action.yml"


class TestActionMetadata:
    """Test cases for action.yml."""

    def test_installs_into_virtualenv(self):
        """Test that pip runs from the action's own venv."""
        content = ACTION_FILE.read_text()

        assert 'python -m venv "$RUNNER_TEMP/sqs-delete-queue-venv"' in content
        assert '"$RUNNER_TEMP/sqs-delete-queue-venv/bin/pip" install' in content
        assert "\n        pip install" not in content

    def test_runs_script_from_virtualenv(self):
        """Test that the console script is taken from the venv."""
        content = ACTION_FILE.read_text()

        assert 'run: "$RUNNER_TEMP/sqs-delete-queue-venv/bin/sqs-delete-queue"' in content

    def test_inputs_and_output_wired(self):
        """Test that inputs reach the runner variables and deleted is exposed."""
        content = ACTION_FILE.read_text()

        assert "INPUT_QUEUE-URL: ${{ inputs.queue-url }}" in content
        assert "value: ${{ steps.delete.outputs.deleted }}" in content
