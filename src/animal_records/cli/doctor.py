"""``animals doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether
the runtime environment and the collection directories are usable.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich when installed.  It only inspects;
it never creates a collection directory.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from animal_records.cli import exit_codes
from animal_records.cli.console import console, escape
from animal_records.config import Settings
from animal_records.core.models import KINDS
from animal_records.core.protocols import RecordKind
from animal_records.infra.file_store import FileRecordStore
from animal_records.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the optional Rich dependency."""
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"

    # Fallback: rich importable but its distribution metadata is absent.
    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _root_check(store: FileRecordStore) -> tuple[str, str, str]:
    """Return (label, value, status) for the collection root row."""
    root = store.root
    if root.is_dir():
        return "root", str(root), "[green]OK[/green]"
    if root.exists():
        return "root", str(root), "[red]FAIL (not a directory)[/red]"
    return "root", str(root), "[yellow]WARN (created on first use)[/yellow]"


def _collection_check(store: FileRecordStore, kind: type[RecordKind]) -> tuple[str, str, str]:
    """Return (label, value, status) for one collection directory row."""
    status_obj = store.collection_status(kind)
    label = kind.collection_name()
    if not status_obj.exists:
        return label, f"{status_obj.path} (missing)", "[yellow]WARN[/yellow]"
    count = "?" if status_obj.count is None else str(status_obj.count)
    value = f"{status_obj.path} ({count} records)"
    if not status_obj.writable or status_obj.count is None:
        return label, value, "[red]FAIL (not accessible)[/red]"
    return label, value, "[green]OK[/green]"


def _version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the animal-records version row."""
    return "animal-records", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nanimals doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<16} {'Value':<44} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<16} {value:<44} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: Settings) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Missing collection
        directories are a WARN: they are created on first use.
    """
    store = FileRecordStore(settings.root)
    checks = [
        _version_check(),
        _python_version_check(),
        _rich_check(),
        _root_check(store),
        *(_collection_check(store, kind) for kind in KINDS.values()),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="animals doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
