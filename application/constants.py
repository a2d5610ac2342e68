"""Application-level constants."""

from pathlib import Path

# Input columns for batch scoring
GUESS_COL = "guess"
CORRECT_COL = "correct"

# Report keys
STATUS_KEY = "status"
VERDICT_KEY = "verdict"
SCORE_KEY = "score"
COMMON_ANCESTOR_KEY = "common_ancestor"
SHARED_PREFIX_KEY = "shared_prefix"
GUESS_BRANCH_KEY = "guess_branch"
CORRECT_BRANCH_KEY = "correct_branch"
SIBLINGS_KEY = "siblings"
UNRESOLVED_KEY = "unresolved"

# Batch-only status for pairs whose ancestry walk hit a parent cycle
CYCLE_DETECTED_STATUS = "cycle_detected"

# Output locations
OUTPUT_ROOT = Path("outputs")
REPORT_FILENAME = "comparisons.json"
LOG_FILENAME = "run.log"
