"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for taxonomy nodes and comparison results
- errors: Exception hierarchy
- taxonomy: Parsing, storage, identifier resolution, ancestry walks
- comparison: Distance scoring and ancestry diffs
"""

from domain.schemas import (
    AncestryDiff,
    ComparisonOutcome,
    ComparisonStatus,
    DisplayEntry,
    FamilyComparisonResult,
    NodeLevel,
    TaxonomyNode,
)

__all__ = [
    "TaxonomyNode",
    "NodeLevel",
    "FamilyComparisonResult",
    "ComparisonOutcome",
    "ComparisonStatus",
    "AncestryDiff",
    "DisplayEntry",
]
