#!/usr/bin/env python3
"""Rule matchers deciding whether a single rule matches a path.

Two matchers are provided:
- Simple: rules with one segment ("*.pyc", "/build", "cache/")
- Complex: rules with several segments ("foo/bar", "/docs/*/build/")

A leading "/" on a rule anchors its first segment to the first path segment.
A trailing "/" restricts the rule to directories: its last segment must match
the last path segment and the path must itself end with "/".

Complex rules require every segment to be present in the path and in the
same relative order; bare "*" / "**" segments are exempt from the ordering
check. Every check uses the first path segment matching a rule segment, so
an early match can hide a later one (no backtracking).

Combining several rules into a verdict is left to the caller.

Example:
    >>> rule_matches_path("foo/ignore_me", "/foo/ignore_me")
    True
    >>> rule_matches_path("foo/ignore_me", "/ignore_me/foo")
    False
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from gitignore_checker.core.path_utils import has_leading_slash, has_trailing_slash, tokenize
from gitignore_checker.core.errors import InvalidArgumentError
from gitignore_checker.infrastructure.logger import Logger, get_logger
from gitignore_checker.rules.patterns import (
    SegmentPattern,
    compile_segment,
    compile_segments,
    exists_match,
    first_match_index,
)


@dataclass(frozen=True)
class Rule:
    """A single ignore rule."""

    raw: str

    @property
    def has_leading_anchor(self) -> bool:
        return has_leading_slash(self.raw)

    @property
    def has_trailing_anchor(self) -> bool:
        return has_trailing_slash(self.raw)

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(tokenize(self.raw))

    @property
    def is_multi_segment(self) -> bool:
        return len(self.segments) > 1

    def patterns(self) -> List[SegmentPattern]:
        """Compile each segment of the rule."""
        return compile_segments(self.segments)


@dataclass(frozen=True)
class TargetPath:
    """A path tested against rules. A trailing "/" marks a directory."""

    raw: str

    @property
    def has_trailing_anchor(self) -> bool:
        return has_trailing_slash(self.raw)

    @property
    def is_directory(self) -> bool:
        return self.has_trailing_anchor

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(tokenize(self.raw))


def rule_is_multi_segment(rule: str) -> bool:
    """Check if a rule needs the complex matcher.

    Args:
        rule: Rule text

    Returns:
        True if the rule has more than one segment ("foo/bar", "/a/b/")
    """
    return Rule(rule).is_multi_segment


def _matches_directory_at_end(index: Optional[int], path: TargetPath, tokens: Sequence[str]) -> bool:
    """Check a trailing-anchor match: last segment of a directory path."""
    return index is not None and index == len(tokens) - 1 and path.is_directory


def _match_simple(rule: Rule, target: TargetPath, logger: Logger) -> bool:
    if not rule.segments:
        logger.debug("Rule has no segments")
        return False

    pattern = compile_segment(rule.raw)
    tokens = target.segments
    index = first_match_index(pattern, tokens)

    if index is None:
        logger.debug("No path segment matches rule")
        return False

    if rule.has_leading_anchor and index != 0:
        logger.debug("Anchored rule does not match first segment", index=index)
        return False

    if rule.has_trailing_anchor and not _matches_directory_at_end(index, target, tokens):
        logger.debug("Directory rule does not match path end", index=index)
        return False

    logger.debug("Rule matches path", index=index)
    return True


def rule_matches_path_simple(rule: str, path: str) -> bool:
    """Match a single-segment rule against a path.

    Args:
        rule: Rule without internal separators
        path: Path to test

    Returns:
        True if the rule matches the path

    Raises:
        InvalidArgumentError: If the rule has more than one segment
    """
    parsed_rule = Rule(rule)
    if parsed_rule.is_multi_segment:
        raise InvalidArgumentError(
            f'Rule "{rule}" cannot be used here: it spans several segments', rule=rule
        )

    logger = get_logger()
    with logger.add_context(rule=rule, path=path):
        return _match_simple(parsed_rule, TargetPath(path), logger)


def _match_complex(rule: Rule, target: TargetPath, logger: Logger) -> bool:
    patterns = rule.patterns()
    tokens = target.segments

    if not patterns:
        logger.debug("Rule has no segments")
        return False

    for pattern in patterns:
        if not exists_match(pattern, tokens):
            logger.debug("Rule segment missing from path", segment=pattern.segment)
            return False

    last_index: Optional[int] = None
    for pattern in patterns:
        if pattern.is_wildcard:
            continue

        index = first_match_index(pattern, tokens)
        if last_index is not None and index <= last_index:
            logger.debug("Rule segments out of order", segment=pattern.segment)
            return False
        last_index = index

    if rule.has_leading_anchor and first_match_index(patterns[0], tokens) != 0:
        logger.debug("Anchored rule does not match first segment")
        return False

    if rule.has_trailing_anchor and not _matches_directory_at_end(
        first_match_index(patterns[-1], tokens), target, tokens
    ):
        logger.debug("Directory rule does not match path end")
        return False

    logger.debug("Rule matches path")
    return True


def rule_matches_path_complex(rule: str, path: str) -> bool:
    """Match a rule of any shape against a path.

    Every rule segment must be found in the path, in order, and the
    anchors of the rule must hold.

    Args:
        rule: Rule text
        path: Path to test

    Returns:
        True if the rule matches the path
    """
    logger = get_logger()
    with logger.add_context(rule=rule, path=path):
        return _match_complex(Rule(rule), TargetPath(path), logger)


def rule_matches_path(rule: str, path: str) -> bool:
    """Match a rule against a path, picking the simple or complex matcher.

    Args:
        rule: Rule text
        path: Path to test

    Returns:
        True if the rule matches the path
    """
    if rule_is_multi_segment(rule):
        return rule_matches_path_complex(rule, path)
    return rule_matches_path_simple(rule, path)
