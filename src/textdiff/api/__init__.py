"""
Diff engine package.
"""

from .diff import (
    DiffMode,
    DiffResult,
    DiffStatistics,
    EditEntry,
    EditKind,
    InlineChange,
    InlineLine,
    SideBySideRow,
    compare_texts,
    diff,
    diff_characters,
    diff_lines,
    diff_words,
    line_diff_with_inline_changes,
    side_by_side_diff,
    unified_diff,
)

__all__ = [
    'DiffMode',
    'DiffResult',
    'DiffStatistics',
    'EditEntry',
    'EditKind',
    'InlineChange',
    'InlineLine',
    'SideBySideRow',
    'compare_texts',
    'diff',
    'diff_characters',
    'diff_lines',
    'diff_words',
    'line_diff_with_inline_changes',
    'side_by_side_diff',
    'unified_diff',
]
