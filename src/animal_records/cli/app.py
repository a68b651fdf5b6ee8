"""CLI application entry point and command routing for animal-records.

This module is the **sole error boundary** for the entire application.
It catches :class:`~animal_records.exceptions.AnimalRecordsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure store.
* Command results go to stdout; diagnostics and errors go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
* A bare command or a kind without an action prints help and exits 0,
  matching the no-argument case; argparse usage errors still exit 2.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from animal_records.cli import exit_codes
from animal_records.cli.console import console, escape, output
from animal_records.config import Settings, load_settings
from animal_records.core.models import KINDS, get_kind
from animal_records.core.protocols import RecordKind
from animal_records.core.record_service import RecordService
from animal_records.exceptions import AnimalRecordsError
from animal_records.infra.file_store import FileRecordStore
from animal_records.utils.logging_setup import setup_logging
from animal_records.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``animals <kind> list``
    * ``animals <kind> show NAME``
    * ``animals <kind> new --name N --owner O --age A``
    * ``animals doctor``  — environment diagnostics
    * ``animals --version``

    where ``<kind>`` is one of the registered record kinds.
    """
    parser = argparse.ArgumentParser(
        prog="animals",
        description="Create, list and show dog and cat records.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Collection root directory (default: $ANIMAL_RECORDS_ROOT or 'animals').",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug logs to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")

    for word, kind in KINDS.items():
        kind_parser = commands.add_parser(word, help=f"Manage {kind.collection_name()}.")
        kind_parser.set_defaults(help_parser=kind_parser)
        actions = kind_parser.add_subparsers(dest="action", metavar="<action>")

        actions.add_parser("list", help=f"List stored {kind.collection_name()}.")

        show_parser = actions.add_parser("show", help=f"Show one {word}.")
        show_parser.add_argument("name", help=f"Name of the {word}.")

        new_parser = actions.add_parser("new", help=f"Create or replace a {word}.")
        new_parser.add_argument("-n", "--name", required=True, help=f"Name of the {word}.")
        new_parser.add_argument("-o", "--owner", required=True, help="Name of the owner.")
        new_parser.add_argument("-a", "--age", required=True, help=f"Age of the {word} (0-255).")

    commands.add_parser("doctor", help="Check the environment and collection directories.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(service: RecordService, kind: type[RecordKind], args: argparse.Namespace) -> int:
    """Print every stored name of *kind*, one per line."""
    names = service.list_names(kind)
    if not names:
        output.print(f"No {kind.collection_name()} found", markup=False)
    for name in names:
        output.print(name, markup=False)
    return exit_codes.SUCCESS


def _handle_show(service: RecordService, kind: type[RecordKind], args: argparse.Namespace) -> int:
    """Print one record with its fields in name, owner, age order."""
    record = service.show(kind, args.name)
    output.print(format_record(record), markup=False)
    return exit_codes.SUCCESS


def _handle_new(service: RecordService, kind: type[RecordKind], args: argparse.Namespace) -> int:
    """Create a record from the ``--name/--owner/--age`` flags."""
    record = service.create(kind, args.name, args.owner, args.age)
    console.print(f"Saved {kind.kind_name()} {record.name!r}.", markup=False)
    return exit_codes.SUCCESS


_ACTIONS: dict[str, Callable[[RecordService, type[RecordKind], argparse.Namespace], int]] = {
    "list": _handle_list,
    "show": _handle_show,
    "new": _handle_new,
}


def _handle_doctor(settings: Settings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from animal_records.cli.doctor import run_doctor

    return run_doctor(settings)


def format_record(record: RecordKind) -> str:
    """Render *record* as ``Kind(name='…', owner='…', age=N)``."""
    return (
        f"{type(record).__name__}("
        f"name={record.name!r}, owner={record.owner!r}, age={record.age})"
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the animal-records CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = load_settings(
        root=args.root,
        log_level="DEBUG" if args.verbose else None,
    )
    setup_logging(settings.log_level)

    if args.command == "doctor":
        return _handle_doctor(settings)

    kind = get_kind(args.command)
    if args.action is None:
        args.help_parser.print_help()
        return exit_codes.SUCCESS

    store = FileRecordStore(settings.root)
    store.ensure_collections(KINDS.values())
    service = RecordService(store)
    return _ACTIONS[args.action](service, kind, args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AnimalRecordsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
