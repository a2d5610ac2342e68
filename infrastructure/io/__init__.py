"""I/O utilities: taxonomy sources, filesystem checks, and dataset loading."""

from infrastructure.io.datasets import read_table, write_json
from infrastructure.io.fs import ensure_exists
from infrastructure.io.sources import read_source, read_sources

__all__ = [
    "ensure_exists",
    "read_table",
    "write_json",
    "read_source",
    "read_sources",
]
