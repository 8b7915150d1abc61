"""Hypothesis property-based tests for Cursor.

Tests cursor immutability, clamping, and line/column properties.
Complements test_cursor.py with property-based testing.
"""

from __future__ import annotations

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from branchparse.syntax.cursor import Cursor, Lexeme

# ============================================================================
# HYPOTHESIS STRATEGIES
# ============================================================================


source_text = st.text(
    alphabet=st.characters(blacklist_categories=["Cs"], blacklist_characters=["\r"]),
    min_size=0,
    max_size=200,
)

positions = st.integers(min_value=0, max_value=300)


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestCursorProperties:
    """Test cursor navigation properties."""

    @given(source=source_text, pos=positions, count=st.integers(min_value=0, max_value=50))
    @settings(max_examples=200)
    def test_advance_never_passes_eof(self, source: str, pos: int, count: int) -> None:
        """INVARIANT: advance() clamps to the source length."""
        assume(pos <= len(source))

        cursor = Cursor(source, pos).advance(count)

        assert cursor.pos == min(pos + count, len(source))
        assert cursor.source == source

    @given(source=source_text, pos=positions)
    @settings(max_examples=200)
    def test_advance_leaves_original_unchanged(self, source: str, pos: int) -> None:
        """INVARIANT: Cursor is immutable - advance() returns a NEW cursor."""
        assume(pos < len(source))

        cursor = Cursor(source, pos)
        cursor.advance()

        assert cursor.pos == pos

    @given(source=source_text, pos=positions)
    @settings(max_examples=200)
    def test_line_col_matches_prefix(self, source: str, pos: int) -> None:
        """PROPERTY: line/column agree with the text before the position."""
        assume(pos <= len(source))

        line, col = Cursor(source, pos).compute_line_col()
        prefix = source[:pos]

        assert line == prefix.count("\n") + 1
        assert col == len(prefix.rsplit("\n", 1)[-1]) + 1

    @given(source=source_text, start=positions, end=positions)
    @settings(max_examples=200)
    def test_lexeme_between_matches_slice(self, source: str, start: int, end: int) -> None:
        """PROPERTY: a lexeme between two cursors is the source slice between them."""
        assume(start <= end <= len(source))

        lexeme = Lexeme.between(Cursor(source, start), Cursor(source, end))

        assert lexeme.text == source[start:end]
        assert len(lexeme) == Cursor(source, start).distance(Cursor(source, end))
