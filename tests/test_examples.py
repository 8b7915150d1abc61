"""Smoke test for the runnable example scripts."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


class TestQuickstart:
    """Run examples/quickstart.py and compare against its documented output."""

    def test_runs_to_completion(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The quickstart prints every example and finishes."""
        runpy.run_path(str(EXAMPLES_DIR / "quickstart.py"), run_name="__main__")

        output = capsys.readouterr().out
        assert "All examples completed successfully!" in output
        assert "Failed 5" in output
        assert "1 4" in output
        assert "2 item(s), stopped at offset 7" in output
        assert "error: 1:5: Expected 'abc'" in output
        assert "Lexeme(source='abc,abc', start=3, end=4)" in output
        assert "     |     ^" in output
