"""Quickstart Example - branchparse in five minutes.

Demonstrates:
1. Matching a list of items with a counting sink
2. Separated lists and trailing separators
3. Optional lists and empty aggregates
4. Capturing separators as lexemes
5. Continuation dispatch with visit()
6. Error reporting with line/column context

Python 3.13+.
"""

from __future__ import annotations

from branchparse import (
    CountSink,
    Cursor,
    Failed,
    ParseError,
    capture,
    label,
    list_,
    lit,
    opt,
    parse,
    sep,
    trailing_sep,
    visit,
)

# Example 1: Bare list
print("=" * 50)
print("Example 1: Bare List")
print("=" * 50)

# "ab" is the condition; once it matched, "c" is mandatory.
item = lit("ab") >> lit("c") + label(0)
items = list_(item, sink=CountSink)

print(parse(items, "abcabcabc").unwrap())
# Output: 3

print(parse(items, "abca").cursor.pos)
# Output: 3  (the trailing "a" is not an item start, so the list stops cleanly)

outcome = parse(items, "abcab")
print(type(outcome).__name__, outcome.cursor.pos)
# Output: Failed 5  (the second "ab" committed, then "c" was missing)

# Example 2: Separators
print("\n" + "=" * 50)
print("Example 2: sep() and trailing_sep()")
print("=" * 50)

word = lit("abc") >> label(0)
separated = list_(word, sep(lit(",")), sink=CountSink)
trailing = list_(word, trailing_sep(lit(",")), sink=CountSink)

print(parse(separated, "abc,abc,abc").unwrap())
# Output: 3

print(type(parse(separated, "abc,")).__name__)
# Output: Failed  (a separator demands another item)

result = parse(trailing, "abc,")
print(result.unwrap(), result.cursor.pos)
# Output: 1 4  (the trailing separator is consumed)

# Example 3: Optional lists
print("\n" + "=" * 50)
print("Example 3: opt(list)")
print("=" * 50)

print(parse(opt(separated), "").unwrap())
# Output: 0  (an empty aggregate, not "no value")

print(parse(opt(list_(word)), "xyz").unwrap())
# Output: ()

# Example 4: Captured separators
print("\n" + "=" * 50)
print("Example 4: capture()")
print("=" * 50)

values = parse(list_(word, sep(capture(lit(",")))), "abc,abc").unwrap()
for value in values:
    print(value)
# Output:
# LabelMarker(identity=0)
# Lexeme(source='abc,abc', start=3, end=4)
# LabelMarker(identity=0)

# Example 5: Continuation dispatch
print("\n" + "=" * 50)
print("Example 5: visit()")
print("=" * 50)


class Summary:
    """Turns a counted list outcome into a sentence."""

    def success(self, cursor: Cursor, count: int) -> str:
        return f"{count} item(s), stopped at offset {cursor.pos}"

    def error(self, error: ParseError) -> str:
        return f"error: {error.format_error()}"


print(visit(separated, "abc,abc", Summary()))
# Output: 2 item(s), stopped at offset 7

print(visit(separated, "abc,ab", Summary()))
# Output: error: 1:5: Expected 'abc'

# Example 6: Error context
print("\n" + "=" * 50)
print("Example 6: Error Context")
print("=" * 50)

lines = list_(word, sep(lit(",\n") | lit(",")), sink=CountSink)
failure = parse(lines, "abc,abc,\nabc,ab")
if isinstance(failure, Failed):
    print(failure.error.format_with_context())
# Output:
# 2:5: Expected 'abc'
#
#    1 | abc,abc,
#    2 | abc,ab
#      |     ^

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
