"""gitignore-checker Rules System.

This module provides rule compilation and matching:
- SegmentPattern: a compiled rule segment
- Simple and complex rule matchers

Rules follow a gitignore-like mini-language: "/"-separated segments,
"*" wildcards, and leading/trailing "/" anchors.
"""

from .matcher import (
    Rule,
    TargetPath,
    rule_is_multi_segment,
    rule_matches_path,
    rule_matches_path_complex,
    rule_matches_path_simple,
)
from .patterns import (
    SegmentPattern,
    build_rule_expression,
    compile_segment,
    compile_segments,
    exists_match,
    expression_matches,
    first_match_index,
    matches,
)

__all__ = [
    # Pattern compilation
    "SegmentPattern",
    "build_rule_expression",
    "compile_segment",
    "compile_segments",
    "expression_matches",
    "matches",
    "first_match_index",
    "exists_match",
    # Rule matchers
    "Rule",
    "TargetPath",
    "rule_is_multi_segment",
    "rule_matches_path",
    "rule_matches_path_simple",
    "rule_matches_path_complex",
]
