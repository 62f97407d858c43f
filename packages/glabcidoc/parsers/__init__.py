"""Parsers for GitLab CI configuration files.

Only job definition lines and `#= ` documentation lines are recognised; the
rest of the YAML document is skipped.
"""
from __future__ import annotations

from glabcidoc.parsers.doc_comment_parser import DOC_MARKER, parse_file, parse_jobs

__all__ = [
    "DOC_MARKER",
    "parse_file",
    "parse_jobs",
]
