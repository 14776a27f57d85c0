"""
Text diff API.
Compares two texts line by line, word by word or character by character
using a longest common subsequence table, and renders the result as a
unified diff, side-by-side rows or lines with inline character ranges.
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from textdiff.exceptions import InvalidInputError, TextDiffError, UnsupportedModeError

logger = logging.getLogger(__name__)

# Capturing group keeps the whitespace runs as tokens of their own
WORD_SPLIT_PATTERN = re.compile(r'(\s+)')

DEFAULT_ORIGINAL_NAME = 'original'
DEFAULT_MODIFIED_NAME = 'modified'

SUPPORTED_FORMATS = ('json', 'unified', 'side-by-side', 'inline', 'stats-only')


class DiffMode(str, Enum):
    """Granularity of the comparison."""

    LINE = 'line'
    WORD = 'word'
    CHARACTER = 'character'

    @classmethod
    def parse(cls, value: Any) -> 'DiffMode':
        """Resolve a mode from its name, raising UnsupportedModeError for anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise UnsupportedModeError(value) from None


class EditKind(str, Enum):
    ADDED = 'added'
    REMOVED = 'removed'
    UNCHANGED = 'unchanged'
    # Part of the result taxonomy only, the alignment never emits it
    MODIFIED = 'modified'


@dataclass(frozen=True)
class EditEntry:
    """One token of the edit script, in emission order."""

    kind: EditKind
    sequence_index: int
    content: str
    source_index: Optional[int] = None
    target_index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        data = {
            'type': self.kind.value,
            'lineNumber': self.sequence_index,
            'content': self.content,
        }
        if self.source_index is not None:
            data['originalLineNumber'] = self.source_index
        if self.target_index is not None:
            data['newLineNumber'] = self.target_index
        return data


@dataclass(frozen=True)
class DiffStatistics:
    added: int = 0
    removed: int = 0
    modified: int = 0
    unchanged: int = 0
    total_entries: int = 0

    @classmethod
    def from_entries(cls, entries: Sequence[EditEntry]) -> 'DiffStatistics':
        counts = {kind: 0 for kind in EditKind}
        for entry in entries:
            counts[entry.kind] += 1
        return cls(
            added=counts[EditKind.ADDED],
            removed=counts[EditKind.REMOVED],
            modified=counts[EditKind.MODIFIED],
            unchanged=counts[EditKind.UNCHANGED],
            total_entries=len(entries),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            'added': self.added,
            'removed': self.removed,
            'modified': self.modified,
            'unchanged': self.unchanged,
            'totalLines': self.total_entries,
        }


@dataclass(frozen=True)
class DiffResult:
    """Edit script, statistics and similarity for one comparison."""

    entries: Tuple[EditEntry, ...]
    stats: DiffStatistics
    similarity: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            'lines': [entry.to_dict() for entry in self.entries],
            'stats': self.stats.to_dict(),
            'similarity': self.similarity,
        }


@dataclass(frozen=True)
class InlineChange:
    """Character range [start_index, end_index) changed within a single line."""

    start_index: int
    end_index: int
    kind: EditKind

    def to_dict(self) -> Dict[str, Any]:
        return {
            'startIndex': self.start_index,
            'endIndex': self.end_index,
            'type': self.kind.value,
        }


@dataclass(frozen=True)
class InlineLine:
    entry: EditEntry
    inline_changes: Tuple[InlineChange, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data = self.entry.to_dict()
        data['inlineChanges'] = [change.to_dict() for change in self.inline_changes]
        return data


@dataclass(frozen=True)
class SideBySideRow:
    original: List[str]
    modified: List[str]

    def to_dict(self) -> Dict[str, List[str]]:
        return {'original': list(self.original), 'modified': list(self.modified)}


def _ensure_text(*values: Any) -> None:
    if not all(isinstance(value, str) for value in values):
        raise InvalidInputError()


# Tokenizers

def tokenize_lines(text: str) -> List[str]:
    """Split on newlines; an empty text has no lines at all."""
    if text == '':
        return []
    return text.split('\n')


def tokenize_words(text: str) -> List[str]:
    """Split into alternating runs of non-whitespace and whitespace."""
    return [token for token in WORD_SPLIT_PATTERN.split(text) if token]


def tokenize_characters(text: str) -> List[str]:
    return list(text)


TOKENIZERS: Dict[DiffMode, Callable[[str], List[str]]] = {
    DiffMode.LINE: tokenize_lines,
    DiffMode.WORD: tokenize_words,
    DiffMode.CHARACTER: tokenize_characters,
}


def tokenize(text: str, mode: Any = DiffMode.LINE) -> List[str]:
    """Tokenize a text according to the given comparison mode."""
    _ensure_text(text)
    return TOKENIZERS[DiffMode.parse(mode)](text)


# Alignment

def lcs_table(tokens1: Sequence[str], tokens2: Sequence[str]) -> List[List[int]]:
    """
    Build the (m+1) x (n+1) longest common subsequence length table.

    Row 0 and column 0 stay zero; table[i][j] is the LCS length of
    tokens1[:i] and tokens2[:j].
    """
    m, n = len(tokens1), len(tokens2)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        previous_row = table[i - 1]
        row = table[i]
        token = tokens1[i - 1]
        for j in range(1, n + 1):
            if token == tokens2[j - 1]:
                row[j] = previous_row[j - 1] + 1
            else:
                row[j] = max(previous_row[j], row[j - 1])

    return table


def backtrack(tokens1: Sequence[str], tokens2: Sequence[str],
              table: List[List[int]]) -> List[EditEntry]:
    """
    Walk the LCS table from the bottom-right corner and rebuild the edit script.

    When both neighbours hold the same LCS length an addition is emitted
    before a removal. Source and target indices are 1-based positions in
    the respective token sequences.
    """
    i, j = len(tokens1), len(tokens2)
    steps = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and tokens1[i - 1] == tokens2[j - 1]:
            steps.append((EditKind.UNCHANGED, tokens1[i - 1], i, j))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            steps.append((EditKind.ADDED, tokens2[j - 1], None, j))
            j -= 1
        else:
            steps.append((EditKind.REMOVED, tokens1[i - 1], i, None))
            i -= 1

    steps.reverse()
    return [
        EditEntry(kind=kind, sequence_index=index, content=content,
                  source_index=source_index, target_index=target_index)
        for index, (kind, content, source_index, target_index) in enumerate(steps, start=1)
    ]


def align(tokens1: Sequence[str], tokens2: Sequence[str]) -> List[EditEntry]:
    """Align two token sequences and return the classified edit script."""
    return backtrack(tokens1, tokens2, lcs_table(tokens1, tokens2))


# Similarity

def levenshtein_distance(text1: str, text2: str) -> int:
    """Single-character edit distance with unit substitution, insertion and deletion costs."""
    previous = list(range(len(text2) + 1))

    for i, char1 in enumerate(text1, start=1):
        current = [i] + [0] * len(text2)
        for j, char2 in enumerate(text2, start=1):
            if char1 == char2:
                current[j] = previous[j - 1]
            else:
                current[j] = min(previous[j - 1], current[j - 1], previous[j]) + 1
        previous = current

    return previous[-1]


def calculate_similarity(text1: str, text2: str) -> int:
    """
    Similarity of two whole texts as an integer percentage.

    Based on the normalized Levenshtein distance of the raw strings, so it
    does not depend on the comparison mode.
    """
    if text1 == text2:
        return 100
    if not text1 or not text2:
        return 0

    distance = levenshtein_distance(text1, text2)
    max_length = max(len(text1), len(text2))
    # Round half up
    return int(math.floor((max_length - distance) / max_length * 100 + 0.5))


# Entry points

def diff(text1: str, text2: str, mode: Any = DiffMode.LINE) -> DiffResult:
    """
    Compare two texts.

    Args:
        text1: The original text
        text2: The modified text
        mode: 'line', 'word' or 'character'

    Returns:
        DiffResult with the edit script, statistics and similarity percentage

    Raises:
        InvalidInputError: if either text is not a string
        UnsupportedModeError: if the mode is not recognised
    """
    _ensure_text(text1, text2)
    diff_mode = DiffMode.parse(mode)

    tokenizer = TOKENIZERS[diff_mode]
    tokens1 = tokenizer(text1)
    tokens2 = tokenizer(text2)
    logger.debug("Diffing %d against %d tokens in %s mode",
                 len(tokens1), len(tokens2), diff_mode.value)

    entries = tuple(align(tokens1, tokens2))
    return DiffResult(
        entries=entries,
        stats=DiffStatistics.from_entries(entries),
        similarity=calculate_similarity(text1, text2),
    )


def diff_lines(text1: str, text2: str) -> DiffResult:
    return diff(text1, text2, DiffMode.LINE)


def diff_words(text1: str, text2: str) -> DiffResult:
    return diff(text1, text2, DiffMode.WORD)


def diff_characters(text1: str, text2: str) -> DiffResult:
    return diff(text1, text2, DiffMode.CHARACTER)


def unified_diff(text1: str, text2: str, name1: str = DEFAULT_ORIGINAL_NAME,
                 name2: str = DEFAULT_MODIFIED_NAME) -> str:
    """
    Render a git-style unified diff of the whole texts.

    Every aligned line is emitted; there are no hunk headers or context windows.
    """
    _ensure_text(text1, text2)
    prefixes = {
        EditKind.REMOVED: '-',
        EditKind.ADDED: '+',
        EditKind.UNCHANGED: ' ',
    }

    lines = [f'--- {name1}', f'+++ {name2}']
    for entry in diff_lines(text1, text2).entries:
        lines.append(f'{prefixes[entry.kind]}{entry.content}')

    return '\n'.join(lines)


def side_by_side_diff(text1: str, text2: str) -> List[SideBySideRow]:
    """One row per aligned line, blank on the side where the line is absent."""
    rows = []
    for entry in diff_lines(text1, text2).entries:
        if entry.kind is EditKind.REMOVED:
            rows.append(SideBySideRow(original=[entry.content], modified=['']))
        elif entry.kind is EditKind.ADDED:
            rows.append(SideBySideRow(original=[''], modified=[entry.content]))
        else:
            rows.append(SideBySideRow(original=[entry.content], modified=[entry.content]))
    return rows


def _extend_ranges(ranges: List[List[int]], position: int) -> None:
    if ranges and ranges[-1][1] == position:
        ranges[-1][1] = position + 1
    else:
        ranges.append([position, position + 1])


def _inline_changes(old_line: str, new_line: str) -> Tuple[Tuple[InlineChange, ...], Tuple[InlineChange, ...]]:
    """Character ranges removed from old_line and added in new_line."""
    removed_ranges: List[List[int]] = []
    added_ranges: List[List[int]] = []

    for entry in align(tokenize_characters(old_line), tokenize_characters(new_line)):
        if entry.kind is EditKind.REMOVED:
            _extend_ranges(removed_ranges, entry.source_index - 1)
        elif entry.kind is EditKind.ADDED:
            _extend_ranges(added_ranges, entry.target_index - 1)

    return (
        tuple(InlineChange(start, end, EditKind.REMOVED) for start, end in removed_ranges),
        tuple(InlineChange(start, end, EditKind.ADDED) for start, end in added_ranges),
    )


def line_diff_with_inline_changes(text1: str, text2: str) -> List[InlineLine]:
    """
    Line diff where edited lines carry the character ranges that changed.

    Within each run of consecutive added/removed lines, the n-th removed
    line is paired with the n-th added line. Unpaired lines get no ranges.
    """
    entries = diff_lines(text1, text2).entries
    changes: Dict[int, Tuple[InlineChange, ...]] = {}

    for is_unchanged, group in groupby(entries, key=lambda e: e.kind is EditKind.UNCHANGED):
        if is_unchanged:
            continue
        run = list(group)
        removed = [entry for entry in run if entry.kind is EditKind.REMOVED]
        added = [entry for entry in run if entry.kind is EditKind.ADDED]
        for old_entry, new_entry in zip(removed, added):
            old_changes, new_changes = _inline_changes(old_entry.content, new_entry.content)
            changes[old_entry.sequence_index] = old_changes
            changes[new_entry.sequence_index] = new_changes

    return [InlineLine(entry, changes.get(entry.sequence_index, ())) for entry in entries]


def compare_texts(text1: str, text2: str, mode: Any = DiffMode.LINE, output_format: str = 'json',
                  name1: str = DEFAULT_ORIGINAL_NAME, name2: str = DEFAULT_MODIFIED_NAME) -> Dict[str, Any]:
    """
    Compare two texts and shape the result for an API response.

    Args:
        text1: The original text
        text2: The modified text
        mode: Comparison mode used for the statistics and the 'json' format
        output_format: One of SUPPORTED_FORMATS; 'unified', 'side-by-side'
            and 'inline' are always rendered line by line
        name1: Header for the original side of a unified diff
        name2: Header for the modified side of a unified diff

    Returns:
        Dict with 'success', 'stats', 'similarity', 'diff' (unless stats-only)
        and 'error' when the comparison could not be made
    """
    if output_format not in SUPPORTED_FORMATS:
        return {
            'success': False,
            'error': f'Invalid format. Supported: {list(SUPPORTED_FORMATS)}'
        }

    try:
        _ensure_text(text1, text2)
        diff_mode = DiffMode.parse(mode)
        result = diff(text1, text2, diff_mode)

        response = {
            'success': True,
            'format': output_format,
            'mode': diff_mode.value,
            'stats': result.stats.to_dict(),
            'similarity': result.similarity,
        }

        if output_format == 'json':
            response['diff'] = [entry.to_dict() for entry in result.entries]
        elif output_format == 'unified':
            response['diff'] = unified_diff(text1, text2, name1, name2)
        elif output_format == 'side-by-side':
            response['diff'] = [row.to_dict() for row in side_by_side_diff(text1, text2)]
        elif output_format == 'inline':
            response['diff'] = [line.to_dict() for line in line_diff_with_inline_changes(text1, text2)]

        return response

    except TextDiffError as e:
        return {
            'success': False,
            'error': str(e)
        }
