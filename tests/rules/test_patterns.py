#!/usr/bin/env python3
"""Tests for segment pattern compilation and matching."""

import dataclasses
import time

import pytest

from gitignore_checker.core.constants import NEVER_MATCHES
from gitignore_checker.rules.patterns import (
    SegmentPattern,
    build_rule_expression,
    compile_segment,
    compile_segments,
    exists_match,
    expression_matches,
    first_match_index,
    matches,
)


class TestBuildRuleExpression:
    """Tests for expression text generation."""

    def test_dot_is_escaped(self):
        assert build_rule_expression("README.md") == r"^README\.md$"

    def test_star_becomes_any_sequence(self):
        assert build_rule_expression("*.md") == r"^.*\.md$"

    def test_double_star(self):
        assert build_rule_expression("**") == "^.*$"

    def test_star_runs_collapse(self):
        """Adjacent stars produce a single any-sequence."""
        assert build_rule_expression("a***b*") == "^a.*b.*$"

    def test_anchors_stripped(self):
        assert build_rule_expression("/foo.txt/") == r"^foo\.txt$"

    def test_other_characters_pass_through(self):
        assert build_rule_expression("a+b?") == "^a+b?$"

    def test_expression_matches(self):
        assert expression_matches(r"^foo\.txt$", "FOO.TXT")
        assert not expression_matches(r"^foo\.txt$", "fooXtxt")


class TestCompileSegment:
    """Tests for compile_segment()."""

    def test_returns_segment_pattern(self):
        pattern = compile_segment("*.md")
        assert isinstance(pattern, SegmentPattern)
        assert pattern.segment == "*.md"
        assert pattern.source == r"^.*\.md$"

    def test_extension_wildcard(self):
        pattern = compile_segment("*.md")
        assert pattern.matches("README.md")
        assert not pattern.matches("READMEmd")

    def test_literal_dot(self):
        pattern = compile_segment("README.md")
        assert pattern.matches("README.md")
        assert not pattern.matches("README_md")

    def test_whole_segment_only(self):
        """A plain rule never matches a longer segment."""
        pattern = compile_segment("foo")
        assert pattern.matches("foo")
        assert not pattern.matches("foobar")
        assert not pattern.matches("barfoo")
        assert not pattern.matches(".foo")

    def test_case_insensitive(self):
        pattern = compile_segment("ReadMe.MD")
        assert pattern.matches("readme.md")
        assert pattern.matches("README.MD")

    def test_star_matches_empty(self):
        pattern = compile_segment("foo*")
        assert pattern.matches("foo")
        assert pattern.matches("foobar")

    def test_inner_star(self):
        pattern = compile_segment("ignore*foo")
        assert pattern.matches("ignored_foo")
        assert not pattern.matches("ignored_bar")

    def test_hash_is_literal(self):
        assert compile_segment("#folder").matches("#folder")
        assert compile_segment("tes#t").matches("tes#t")

    def test_wildcard_flags(self):
        assert compile_segment("*").is_wildcard
        assert compile_segment("**").is_wildcard
        assert not compile_segment("*.md").is_wildcard
        assert not compile_segment("foo").is_wildcard

    def test_star_and_double_star_match_anything(self):
        for segment in ("*", "**"):
            pattern = compile_segment(segment)
            assert pattern.matches("anything")
            assert pattern.matches(".hidden")

    def test_frozen(self):
        pattern = compile_segment("foo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.segment = "bar"  # type: ignore

    def test_metacharacters_keep_regex_meaning(self):
        """Only "." and "*" are translated; "+" stays a quantifier."""
        pattern = compile_segment("a+")
        assert pattern.matches("aaa")
        assert not pattern.matches("a+")

    def test_question_mark_keeps_regex_meaning(self):
        pattern = compile_segment("colou?r")
        assert pattern.matches("color")
        assert pattern.matches("colour")

    def test_character_class_keeps_regex_meaning(self):
        pattern = compile_segment("file[0-9]")
        assert pattern.matches("file7")
        assert not pattern.matches("filex")


class TestInvalidExpression:
    """Segments that are not valid expressions never match."""

    def test_unbalanced_bracket(self):
        pattern = compile_segment("[abc")
        assert pattern.source == NEVER_MATCHES
        assert not pattern.matches("[abc")
        assert not pattern.matches("a")
        assert not pattern.matches("")

    def test_unbalanced_parenthesis(self):
        pattern = compile_segment("foo(*")
        assert not pattern.matches("foo(bar")
        assert not pattern.matches("foo(")

    def test_invalid_segment_logs_warning(self, captured_logs):
        compile_segment("(unclosed")
        warnings = [r for r in captured_logs.records if r.levelname == "WARNING"]
        assert len(warnings) == 1
        assert "segment=(unclosed" in warnings[0].getMessage()

    def test_valid_segment_logs_nothing(self, captured_logs):
        compile_segment("*.md")
        assert captured_logs.records == []


class TestCompileSegments:
    """Tests for compile_segments()."""

    def test_keeps_order(self):
        patterns = compile_segments(["foo", "*", "bar"])
        assert [p.segment for p in patterns] == ["foo", "*", "bar"]

    def test_empty(self):
        assert compile_segments([]) == []


class TestTokenMatching:
    """Tests for matches(), first_match_index() and exists_match()."""

    def test_matches(self):
        pattern = compile_segment("ignore_me")
        assert matches(pattern, "ignore_me")
        assert matches(pattern, "IGNORE_ME")
        assert not matches(pattern, "not_ignored")

    def test_first_match_index(self):
        pattern = compile_segment("foo")
        assert first_match_index(pattern, ["bar", "foo", "foo"]) == 1

    def test_first_match_index_at_start(self):
        pattern = compile_segment("foo")
        assert first_match_index(pattern, ["foo", "bar"]) == 0

    def test_first_match_index_none(self):
        pattern = compile_segment("foo")
        assert first_match_index(pattern, ["bar", "baz"]) is None

    def test_first_match_index_empty_tokens(self):
        assert first_match_index(compile_segment("*"), []) is None

    def test_first_match_index_wildcard(self):
        assert first_match_index(compile_segment("*.py"), ["src", "pkg", "mod.py"]) == 2

    def test_exists_match(self):
        pattern = compile_segment("*.md")
        assert exists_match(pattern, ["docs", "README.md"])
        assert not exists_match(pattern, ["docs", "README_md"])
        assert not exists_match(pattern, [])


class TestStarRuns:
    """Runs of stars compile to one any-sequence and match in bounded time."""

    @pytest.mark.parametrize("stars", [2, 8, 14, 30])
    def test_no_catastrophic_backtracking(self, stars):
        pattern = compile_segment("*" * stars + "x")
        assert pattern.source == "^.*x$"

        start = time.perf_counter()
        assert not pattern.matches("a" * 40)
        assert pattern.matches("a" * 40 + "x")
        assert time.perf_counter() - start < 1.0

    def test_same_matches_as_single_star(self):
        for token in ("", "a", "abc.md", "x.y.z"):
            assert compile_segment("**").matches(token) == compile_segment("*").matches(token)
