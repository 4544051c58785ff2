#!/usr/bin/env python3
r"""Segment pattern compilation and matching.

This module turns a single rule segment into a case-insensitive regular
expression and matches it against path segments:
- "." is escaped and only matches itself
- "*" (and "**", which is not special) matches any sequence of characters
- the expression is anchored, so it matches whole segments only
- other regex metacharacters ("+", "?", "[", "|", ...) pass through as-is

A rule like ``foo`` therefore matches the segment ``foo`` but not ``foobar``.

Example:
    >>> pattern = compile_segment("*.md")
    >>> pattern.source
    '^.*\\.md$'
    >>> first_match_index(pattern, ["docs", "README.md"])
    1
"""

import re
from dataclasses import dataclass
from typing import List, Pattern, Sequence

from gitignore_checker.core.constants import (
    ANY_SEQUENCE,
    ESCAPED_DOT,
    NEVER_MATCHES,
    WILDCARD,
    WILDCARD_SEGMENTS,
    MatchIndex,
)
from gitignore_checker.core.path_utils import remove_leading_slash, remove_trailing_slash
from gitignore_checker.infrastructure.logger import get_logger

STAR_RUN = re.compile(re.escape(WILDCARD) + "+")


@dataclass(frozen=True)
class SegmentPattern:
    """A compiled rule segment."""

    segment: str  # Raw rule segment, e.g. "*.md"
    source: str  # Generated expression, e.g. "^.*\.md$"
    compiled: Pattern[str]

    @property
    def is_wildcard(self) -> bool:
        """Check if the segment is a bare wildcard ("*" or "**")."""
        return self.segment in WILDCARD_SEGMENTS

    def matches(self, token: str) -> bool:
        """Check if a single path segment matches this pattern."""
        return self.compiled.search(token) is not None


def build_rule_expression(rule: str) -> str:
    """Build the anchored expression text for a rule.

    Dots are escaped, each run of stars becomes a single ".*", surrounding
    separators are stripped. Nothing else is escaped.

    Args:
        rule: Rule or rule segment

    Returns:
        Expression of the form "^...$"
    """
    expression = STAR_RUN.sub(ANY_SEQUENCE, rule.replace(".", ESCAPED_DOT))
    expression = remove_leading_slash(expression)
    expression = remove_trailing_slash(expression)

    return f"^{expression}$"


def compile_segment(segment: str) -> SegmentPattern:
    """Compile a rule segment into a SegmentPattern.

    If the pass-through metacharacters make the expression invalid (an
    unbalanced "[" or "(" for instance), the segment gets a pattern that
    never matches and a warning is logged.

    Args:
        segment: Rule segment (surrounding "/" are tolerated and stripped)

    Returns:
        Compiled, case-insensitive, whole-segment pattern
    """
    source = build_rule_expression(segment)
    try:
        compiled = re.compile(source, re.IGNORECASE)
    except re.error as e:
        get_logger().warning(
            "Segment is not a valid expression, it will never match",
            segment=segment,
            error=str(e),
        )
        return SegmentPattern(
            segment=segment,
            source=NEVER_MATCHES,
            compiled=re.compile(NEVER_MATCHES),
        )

    return SegmentPattern(segment=segment, source=source, compiled=compiled)


def compile_segments(segments: Sequence[str]) -> List[SegmentPattern]:
    """Compile every segment, keeping order."""
    return [compile_segment(segment) for segment in segments]


def expression_matches(expression: str, value: str) -> bool:
    """Run an expression built by build_rule_expression() against a value.

    Args:
        expression: Expression text
        value: String to test

    Returns:
        True if the expression matches (case-insensitive)
    """
    return re.search(expression, value, re.IGNORECASE) is not None


def matches(pattern: SegmentPattern, token: str) -> bool:
    """Check if a path segment matches a compiled pattern."""
    return pattern.matches(token)


def first_match_index(pattern: SegmentPattern, tokens: Sequence[str]) -> MatchIndex:
    """Find the first path segment matching a pattern.

    Args:
        pattern: Compiled segment pattern
        tokens: Path segments in order

    Returns:
        Lowest matching index, or None if no segment matches
    """
    for index, token in enumerate(tokens):
        if pattern.matches(token):
            return index
    return None


def exists_match(pattern: SegmentPattern, tokens: Sequence[str]) -> bool:
    """Check if at least one path segment matches a pattern."""
    return first_match_index(pattern, tokens) is not None
