"""Tests for subprocess wrapper with rich error context."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from planbranch.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("planbranch.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "success output"
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["git", "status"],
            operation_context="check git status",
            cwd=Path("/repo"),
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["git", "status"],
            cwd=Path("/repo"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    """Test that subprocess failure with stderr includes stderr in error message."""
    with patch("planbranch.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=128,
            cmd=["git", "checkout", "-b", "feature/1--x"],
            stderr="fatal: a branch named 'feature/1--x' already exists\n",
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["git", "checkout", "-b", "feature/1--x"],
                operation_context="create branch 'feature/1--x'",
                cwd=Path("/repo"),
            )

        error_message = str(exc_info.value)
        assert "Failed to create branch 'feature/1--x'" in error_message
        assert "Command: git checkout -b feature/1--x" in error_message
        assert "Exit code: 128" in error_message
        assert "stderr: fatal: a branch named 'feature/1--x' already exists" in error_message


def test_failure_without_output_handles_gracefully() -> None:
    """Test that subprocess failure without stdout/stderr still produces useful error."""
    with patch("planbranch.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(returncode=1, cmd=["git", "status"])

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["git", "status"], operation_context="check status")

        error_message = str(exc_info.value)
        assert "Failed to check status" in error_message
        assert "stderr" not in error_message
        assert "stdout" not in error_message


def test_missing_binary_raises_runtime_error() -> None:
    """Test that a missing executable is reported with the command name."""
    with patch("planbranch.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("git")

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["git", "status"], operation_context="check status")

        assert "Command not found while trying to check status: git" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_check_false_returns_nonzero_result() -> None:
    """Test that check=False passes through without raising."""
    with patch("planbranch.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(
            args=["git"], returncode=1, stdout="", stderr="boom"
        )

        result = run_subprocess_with_context(
            ["git", "status"], operation_context="check status", check=False
        )

        assert result.returncode == 1
        assert mock_run.call_args.kwargs["check"] is False
