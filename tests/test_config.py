"""Tests for settings read from the environment."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from seashell.config import DEFAULT_LOG_LEVEL, resolve_log_level

ROOT = Path(__file__).resolve().parent.parent


class TestLogLevel:
    """Verify SEASHELL_LOG_LEVEL handling."""

    @pytest.mark.parametrize(("value", "expected"), [("debug", "DEBUG"), ("INFO", "INFO"), ("Error", "ERROR")])
    def test_known_levels(self, value: str, expected: str) -> None:
        """Level names are accepted in any case."""
        assert resolve_log_level(value) == expected

    def test_unset(self) -> None:
        """No value means the default level."""
        assert resolve_log_level(None) == DEFAULT_LOG_LEVEL

    def test_unknown_level_falls_back(self) -> None:
        """An unknown name falls back to the default instead of failing."""
        assert resolve_log_level("FOO") == DEFAULT_LOG_LEVEL

    def test_shell_starts_with_unknown_level(self) -> None:
        """The shell still reaches its prompt with a bad level configured."""
        result = subprocess.run(
            [sys.executable, "main.py"],
            input="exit\n",
            capture_output=True,
            text=True,
            cwd=ROOT,
            env={**os.environ, "SEASHELL_LOG_LEVEL": "FOO"},
            timeout=30,
        )
        assert result.returncode == 0
        assert "ValueError" not in result.stderr
