"""animal-records — local command-line manager for dog and cat records.

Each record is a small JSON file stored under a per-kind collection
directory.
"""

from animal_records.version import __version__

__all__: list[str] = ["__version__"]
