"""Hypothesis strategies for branchparse property-based testing.

Strategies are organized by domain:

- grammar: Sources for the list engine (bare, separated, broken tails)
- diagnostics: SourceSpan, Diagnostic, and DiagnosticFormatter instances

Usage:
    from tests.strategies import bare_lists, separated_lists
    from tests.strategies.diagnostics import diagnostics
"""

from .diagnostics import diagnostic_codes, diagnostics, formatters, source_spans
from .grammar import (
    ITEM,
    NOISE_ALPHABET,
    SEPARATOR,
    bare_lists,
    bare_lists_with_partial_tail,
    item_counts,
    noise_text,
    partial_items,
    separated_lists,
    separated_lists_with_broken_tail,
)

__all__ = [
    "ITEM",
    "NOISE_ALPHABET",
    "SEPARATOR",
    "bare_lists",
    "bare_lists_with_partial_tail",
    "diagnostic_codes",
    "diagnostics",
    "formatters",
    "item_counts",
    "noise_text",
    "partial_items",
    "separated_lists",
    "separated_lists_with_broken_tail",
    "source_spans",
]
