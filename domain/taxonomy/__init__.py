"""
Language taxonomy: parsing, storage, identifier resolution, and ancestry.

The store is populated once from delimited text and is read-only afterwards.
Nothing in this package performs file or network I/O.
"""

from domain.taxonomy.ancestry import find_cyclic_nodes, walk_ancestry
from domain.taxonomy.fallbacks import MACROLANGUAGE_FALLBACKS, fallback_for, merge_fallbacks
from domain.taxonomy.parser import parse_csv_line, parse_taxonomy_blocks
from domain.taxonomy.resolver import IdentifierResolver, base_language, same_base_language, to_alpha3
from domain.taxonomy.store import StoreState, TaxonomyStore

__all__ = [
    "TaxonomyStore",
    "StoreState",
    "parse_csv_line",
    "parse_taxonomy_blocks",
    "IdentifierResolver",
    "base_language",
    "same_base_language",
    "to_alpha3",
    "MACROLANGUAGE_FALLBACKS",
    "fallback_for",
    "merge_fallbacks",
    "walk_ancestry",
    "find_cyclic_nodes",
]
