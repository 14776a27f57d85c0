#!/usr/bin/env python3
"""
Command line interface for the text diff engine.

    textdiff text "Hello\\nWorld" "Hello\\nUniverse" --unified
    textdiff file old.txt new.txt --mode word --stats
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from textdiff import __version__
from textdiff.api.diff import (
    DiffMode,
    DiffResult,
    EditKind,
    diff,
    diff_lines,
    unified_diff,
)
from textdiff.exceptions import TextDiffError

logger = logging.getLogger(__name__)

KIND_STYLES = {
    EditKind.ADDED: 'green',
    EditKind.REMOVED: 'red',
    EditKind.MODIFIED: 'yellow',
    EditKind.UNCHANGED: 'bright_black',
}

KIND_PREFIXES = {
    EditKind.ADDED: '+',
    EditKind.REMOVED: '-',
    EditKind.MODIFIED: '~',
    EditKind.UNCHANGED: ' ',
}


def similarity_style(similarity: int) -> str:
    if similarity > 70:
        return 'green'
    if similarity > 40:
        return 'yellow'
    return 'red'


def print_stats(console: Console, result: DiffResult, title: str) -> None:
    """Print the full statistics block."""
    stats = result.stats
    console.print(Text(title, style='bold'), soft_wrap=True)
    console.print(Text('=' * len(title), style='bold'))
    console.print(Text(f'Added: {stats.added}', style='green'))
    console.print(Text(f'Removed: {stats.removed}', style='red'))
    console.print(Text(f'Modified: {stats.modified}', style='yellow'))
    console.print(Text(f'Unchanged: {stats.unchanged}', style='bright_black'))
    console.print(f'Total lines: {stats.total_entries}', highlight=False)
    console.print(Text.assemble('Similarity: ', (f'{result.similarity}%', similarity_style(result.similarity))))


def print_unified(console: Console, text1: str, text2: str, name1: str, name2: str) -> None:
    for line in unified_diff(text1, text2, name1, name2).split('\n'):
        if line.startswith('+++') or line.startswith('---'):
            style = 'bold'
        elif line.startswith('+'):
            style = 'green'
        elif line.startswith('-'):
            style = 'red'
        else:
            style = 'bright_black'
        console.print(Text(line, style=style), soft_wrap=True)


def side_by_side_table(text1: str, text2: str, name1: str, name2: str) -> Table:
    """Two-column table of aligned lines, coloured by edit kind."""
    table = Table(box=box.SIMPLE, show_edge=False, header_style='bold blue')
    table.add_column(Text(name1), overflow='fold')
    table.add_column(Text(name2), overflow='fold')

    for entry in diff_lines(text1, text2).entries:
        if entry.kind is EditKind.REMOVED:
            cells = (Text(entry.content, style='red'), Text(''))
        elif entry.kind is EditKind.ADDED:
            cells = (Text(''), Text(entry.content, style='green'))
        else:
            cells = (Text(entry.content, style='bright_black'), Text(entry.content, style='bright_black'))
        table.add_row(*cells)

    return table


def print_side_by_side(console: Console, text1: str, text2: str, name1: str, name2: str) -> None:
    console.print(side_by_side_table(text1, text2, name1, name2))


def print_entries(console: Console, result: DiffResult, title: str) -> None:
    """Default output: one line per entry followed by a short summary."""
    console.print(Text(title, style='bold blue'), soft_wrap=True)
    console.print('=' * 24)

    for entry in result.entries:
        line = f'{KIND_PREFIXES[entry.kind]} {entry.content}'
        console.print(Text(line, style=KIND_STYLES[entry.kind]), soft_wrap=True)

    stats = result.stats
    console.print()
    console.print(Text('Statistics:', style='bold'))
    console.print(Text.assemble(
        (f'Added: {stats.added}', 'green'), ', ',
        (f'Removed: {stats.removed}', 'red'), ', ',
        (f'Unchanged: {stats.unchanged}', 'bright_black'),
    ))
    console.print(Text.assemble('Similarity: ', (f'{result.similarity}%', similarity_style(result.similarity))))


def render(console: Console, args: argparse.Namespace, text1: str, text2: str,
           name1: str, name2: str, label: Optional[str] = None) -> None:
    """Print a comparison in the format selected by the command line flags."""
    mode = DiffMode.parse(args.mode)
    result = diff(text1, text2, mode)

    if args.stats:
        title = f'Diff Statistics for {label}:' if label else 'Diff Statistics:'
        print_stats(console, result, title)
    elif args.unified:
        print_unified(console, text1, text2, name1, name2)
    elif args.side_by_side:
        print_side_by_side(console, text1, text2, name1, name2)
    else:
        title = f'Diff Result for {label} ({mode.value} mode):' if label else f'Diff Result ({mode.value} mode):'
        print_entries(console, result, title)


def run_text(args: argparse.Namespace, console: Console, error_console: Console) -> int:
    try:
        render(console, args, args.text1, args.text2, 'text1', 'text2')
    except TextDiffError as e:
        error_console.print(Text(f'Error comparing texts: {e}', style='red'))
        return 1
    return 0


def run_file(args: argparse.Namespace, console: Console, error_console: Console) -> int:
    logger.debug("Comparing %s against %s", args.file1, args.file2)
    try:
        with open(args.file1, 'r', encoding='utf-8') as f:
            text1 = f.read()
        with open(args.file2, 'r', encoding='utf-8') as f:
            text2 = f.read()
    except FileNotFoundError:
        error_console.print(Text('Error: File not found. Please check the file paths.', style='red'))
        return 1
    except (OSError, UnicodeDecodeError) as e:
        error_console.print(Text(f'Error reading files: {e}', style='red'))
        return 1

    try:
        render(console, args, text1, text2, args.file1, args.file2,
               label=f'{args.file1} vs {args.file2}')
    except TextDiffError as e:
        error_console.print(Text(f'Error comparing files: {e}', style='red'))
        return 1
    return 0


def _add_diff_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-m', '--mode', default=DiffMode.LINE.value,
                        choices=[mode.value for mode in DiffMode],
                        help='Diff mode: line, word, or character (default: line)')
    output = parser.add_mutually_exclusive_group()
    output.add_argument('-u', '--unified', action='store_true',
                        help='Output in unified diff format')
    output.add_argument('-s', '--side-by-side', action='store_true',
                        help='Output in side-by-side format')
    output.add_argument('--stats', action='store_true',
                        help='Show only statistics')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable color output')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='textdiff',
                                     description='Text diffing tools to compare two texts or files')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    text_parser = subparsers.add_parser('text', help='Compare two text strings')
    text_parser.add_argument('text1', help='First text to compare')
    text_parser.add_argument('text2', help='Second text to compare')
    _add_diff_options(text_parser)
    text_parser.set_defaults(handler=run_text)

    file_parser = subparsers.add_parser('file', help='Compare two files')
    file_parser.add_argument('file1', help='First file to compare')
    file_parser.add_argument('file2', help='Second file to compare')
    _add_diff_options(file_parser)
    file_parser.set_defaults(handler=run_file)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    console = Console(no_color=args.no_color, highlight=False)
    error_console = Console(stderr=True, no_color=args.no_color, highlight=False)
    return args.handler(args, console, error_console)


if __name__ == '__main__':
    sys.exit(main())
