"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/blockdown/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import TextIO

from blockdown.exceptions import DependencyError
from blockdown.parsers.references import LinkReference, ReferenceTable


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: TextIO | None = None
) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when ``--rich`` is set, Rich is installed, and either
    ``--force-rich`` is set or ``stream`` (stderr by default) is a TTY.

    Raises
    ------
    DependencyError
        If ``raise_on_missing`` is true and Rich is not installed

    """
    if not args.rich:
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature_name="Rich output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install blockdown[rich]",
            )
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stderr
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def _text(value: bytes | None) -> str:
    return "" if value is None else value.decode("utf-8", errors="replace")


def _note(references: ReferenceTable, reference: LinkReference) -> str:
    return "" if references.get(reference.id) is reference else "shadowed"


def print_references(references: ReferenceTable, use_rich: bool = False, stream: TextIO | None = None) -> None:
    """Print the reference table, one definition per row.

    A definition whose id was already defined earlier is marked ``shadowed``:
    lookups by id resolve to the first definition.

    Parameters
    ----------
    references : ReferenceTable
        References extracted from the document
    use_rich : bool, default False
        Draw a Rich table instead of tab-separated lines
    stream : TextIO, optional
        Destination, defaults to stderr

    """
    target = stream or sys.stderr

    if use_rich:
        from rich.console import Console
        from rich.table import Table
        from rich.text import Text

        table = Table(title=f"Link references ({len(references)})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Id", style="cyan")
        table.add_column("Link", style="green")
        table.add_column("Title")
        table.add_column("Note", style="yellow")
        for index, reference in enumerate(references, start=1):
            table.add_row(
                str(index),
                Text(_text(reference.id)),
                Text(_text(reference.link)),
                Text(_text(reference.title)),
                _note(references, reference),
            )
        Console(file=target).print(table)
        return

    for reference in references:
        line = f"{_text(reference.id)}\t{_text(reference.link)}\t{_text(reference.title)}"
        note = _note(references, reference)
        print(f"{line}\t{note}" if note else line, file=target)
