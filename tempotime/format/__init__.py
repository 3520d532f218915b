"""Formatting and parsing.

This module provides functions for converting FieldTuples to and from
strings:
    - Token patterns ("MMMM do, yyyy"), compiled once and cached
    - ISO 8601 formatting and parsing
    - Named locale presets

Functions:
    compile_pattern: Compile a token pattern.
    render: Render a FieldTuple through a compiled pattern.
    render_into: Render piece by piece into a sink.
    parse: Parse text through a compiled pattern.
    parse_iso: Parse an ISO 8601 string.
    format_iso: Format a FieldTuple as ISO 8601.

Examples:
    >>> from tempotime.format import compile_pattern, parse, render
    >>> compiled = compile_pattern("yyyy-MM-dd")
    >>> render(compiled, parse(compiled, "2025-10-30"))
    '2025-10-30'
"""

from __future__ import annotations

from tempotime.format.formatter import format_fields, render, render_into
from tempotime.format.iso8601 import format_iso, parse_iso
from tempotime.format.parser import parse, parse_format
from tempotime.format.presets import PRESETS, resolve_preset
from tempotime.format.tokens import (
    CompiledPattern,
    FieldDirective,
    LiteralDirective,
    Token,
    compile_pattern,
)

__all__: list[str] = [
    # Pattern compiler
    "Token",
    "FieldDirective",
    "LiteralDirective",
    "CompiledPattern",
    "compile_pattern",
    # Formatter and parser
    "render",
    "render_into",
    "format_fields",
    "parse",
    "parse_format",
    # ISO 8601
    "parse_iso",
    "format_iso",
    # Presets
    "PRESETS",
    "resolve_preset",
]
