"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure:
loading the taxonomy, answering comparison queries, and batch scoring.
"""

from application.batch import report_records, score_pair, score_pairs
from application.engine import LanguageFamilyEngine
from application.loading import load_taxonomy

__all__ = [
    # Main entry point
    "LanguageFamilyEngine",
    "load_taxonomy",
    # Batch scoring
    "score_pair",
    "score_pairs",
    "report_records",
]
