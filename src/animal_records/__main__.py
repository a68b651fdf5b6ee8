"""Allow ``python -m animal_records`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m animal_records`` behaves identically to the ``animals``
console script.
"""

from __future__ import annotations

from animal_records.cli.app import cli

if __name__ == "__main__":
    cli()
